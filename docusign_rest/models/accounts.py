from typing import List

from pydantic import Field  # type: ignore

from docusign_rest.models.common import DocuSignModel, NameValue
from docusign_rest.models.decoders import DSBool


class LoginAccount(DocuSignModel):
    """An account the authenticated user can act in"""

    account_id: str = ""
    account_id_guid: str = ""
    base_url: str = ""
    email: str = ""
    is_default: DSBool = False
    login_account_settings: List[NameValue] = Field(default_factory=list)
    login_user_settings: List[NameValue] = Field(default_factory=list)
    name: str = ""
    site_description: str = ""
    user_id: str = ""
    user_name: str = ""


class LoginInformation(DocuSignModel):
    api_password: str = ""
    login_accounts: List[LoginAccount] = Field(default_factory=list)

    def default_account(self) -> LoginAccount:
        """The account flagged as default, else the first one

        Raises:
            LookupError: when no account is listed
        """
        for account in self.login_accounts:
            if account.is_default:
                return account
        if not self.login_accounts:
            raise LookupError("no login accounts")
        return self.login_accounts[0]
