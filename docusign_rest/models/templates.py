from typing import List

from pydantic import Field  # type: ignore

from docusign_rest.models.common import DocuSignModel
from docusign_rest.models.decoders import DSTime
from docusign_rest.models.envelopes import EnvelopeSettings
from docusign_rest.models.folders import ResultSet


class TemplateItem(DocuSignModel):
    name: str = ""
    template_id: str = ""
    uri: str = ""


class TemplateList(DocuSignModel):
    """Templates used by an envelope"""

    templates: List[TemplateItem] = Field(default_factory=list)


class FolderTemplateList(ResultSet):
    """Result of a template search"""

    envelope_templates: List[TemplateItem] = Field(default_factory=list)


class TemplateUser(DocuSignModel):
    user_name: str = ""
    user_id: str = ""
    email: str = ""
    uri: str = ""
    user_type: str = ""
    user_status: str = ""


class TemplateDefinition(DocuSignModel):
    template_id: str = ""
    name: str = ""
    shared: str = ""
    password: str = ""
    description: str = ""
    last_modified: DSTime = None
    last_modified_by: TemplateUser = Field(default_factory=TemplateUser)
    page_count: int = 0
    folder_name: str = ""
    folder_id: str = ""
    owner: TemplateUser = Field(default_factory=TemplateUser)


class Template(EnvelopeSettings):
    """A stored template with its documents, recipients and settings"""

    envelope_template_definition: TemplateDefinition = Field(default_factory=TemplateDefinition)
