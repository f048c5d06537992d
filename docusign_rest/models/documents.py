from typing import List, Optional

from pydantic import Field  # type: ignore

from docusign_rest.models.common import DocuSignModel, ErrorDetails, NameValue


class Matchbox(DocuSignModel):
    """Area of a page used for template matching"""

    page_number: str = ""
    x_position: str = ""
    y_position: str = ""
    width: str = ""
    height: str = ""


class Document(DocuSignModel):
    """A document of an envelope or template.

    The content is either sent inline in ``document_base64`` or as a file
    part of a multipart request whose document id matches ``document_id``.
    """

    name: str = ""
    document_id: str = ""
    remote_url: str = ""
    order: str = ""
    transform_pdf_fields: str = ""
    document_fields: List[NameValue] = Field(default_factory=list)
    encrypted_with_key_manager: str = ""
    pages: str = ""
    file_extension: str = ""
    document_base64: str = ""
    matchboxes: List[Matchbox] = Field(default_factory=list)


class DocumentList(DocuSignModel):
    documents: List[Document] = Field(default_factory=list)


class DocumentField(NameValue):
    error_details: Optional[ErrorDetails] = None


class DocumentFieldList(DocuSignModel):
    """Custom fields of one document, errors are reported per field"""

    document_fields: List[DocumentField] = Field(default_factory=list)


class DocumentAsset(DocuSignModel):
    name: str = ""
    type: str = ""
    document_id: str = ""
    order: str = ""
    pages: str = ""
    uri: str = ""
    error_details: Optional[ErrorDetails] = None


class DocumentAssetList(DocuSignModel):
    envelope_id: str = ""
    envelope_documents: List[DocumentAsset] = Field(default_factory=list)
