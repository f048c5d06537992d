from typing import Dict, List, Optional

from pydantic import Field  # type: ignore

from docusign_rest.models.common import DocuSignModel
from docusign_rest.models.decoders import DSTime
from docusign_rest.models.recipients import RecipientList


class Folder(DocuSignModel):
    """A folder and, recursively, its child folders"""

    owner_user_name: str = ""
    owner_email: str = ""
    owner_user_id: str = ""
    type: str = ""
    name: str = ""
    uri: str = ""
    parent_folder_id: str = ""
    parent_folder_uri: str = ""
    folder_id: str = ""
    folders: List["Folder"] = Field(default_factory=list)
    filter: Dict[str, str] = Field(default_factory=dict)


class FolderList(DocuSignModel):
    folders: List[Folder] = Field(default_factory=list)


class FolderItem(DocuSignModel):
    """An envelope listed in a folder or search folder"""

    name: str = ""
    created_date_time: DSTime = None
    envelope_id: str = ""
    envelope_uri: str = ""
    owner_name: str = ""
    sender_email: str = ""
    sender_name: str = ""
    sent_date_time: DSTime = None
    completed_date_time: DSTime = None
    status: str = ""
    subject: str = ""
    recipients: Optional[RecipientList] = None


class ResultSet(DocuSignModel):
    """Paging information of list results"""

    end_position: str = ""
    result_set_size: str = ""
    start_position: str = ""
    total_set_size: str = ""
    total_rows: str = ""
    next_uri: str = ""
    previous_uri: str = ""


class FolderEnvelopeList(ResultSet):
    folder_items: List[FolderItem] = Field(default_factory=list)
