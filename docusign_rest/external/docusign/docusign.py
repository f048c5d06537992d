"""DocuSign data source.

Typed coroutines for the REST v2 endpoints. Each one builds a Call and runs
it on the DocuSignClient; every wrapper accepts an optional ``scope`` to
cancel it or bound it with a deadline.
"""

import inspect
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from pydantic import Field  # type: ignore

from docusign_rest.client.docusign.call import Call, CancelScope, QueryParam
from docusign_rest.client.docusign.docusign import DocuSignClient
from docusign_rest.client.docusign.multipart import UploadFile
from docusign_rest.client.http.http_response import HTTPResponse
from docusign_rest.external.docusign.params import SearchFolder
from docusign_rest.models.accounts import LoginInformation
from docusign_rest.models.common import DocuSignModel
from docusign_rest.models.documents import DocumentAssetList, DocumentFieldList, DocumentList
from docusign_rest.models.envelopes import (
    AuditEventList,
    CustomFieldList,
    Envelope,
    EnvelopeIdList,
    EnvelopeList,
    EnvelopeSummary,
    EnvelopeUris,
    Notification,
)
from docusign_rest.models.folders import FolderEnvelopeList, FolderList
from docusign_rest.models.recipients import RecipientList, RecipientUpdateResult
from docusign_rest.models.tabs import Tabs
from docusign_rest.models.templates import FolderTemplateList, Template, TemplateList
from docusign_rest.models.views import (
    CorrectionViewRequest,
    EnvelopeUrl,
    RecipientViewRequest,
    ReturnUrlRequest,
)

COPY_CHUNK_SIZE = 64 * 1024


class EnvelopeStatusList(DocuSignModel):
    """Answer of the multi envelope status call"""

    envelopes: List[EnvelopeUris] = Field(default_factory=list)


async def _copy(response: HTTPResponse, output: Any) -> int:
    """Stream a response body into ``output`` (sync or async ``write``)"""
    written = 0
    async with response:
        async for chunk in response.aiter_bytes(COPY_CHUNK_SIZE):
            result = output.write(chunk)
            if inspect.isawaitable(result):
                await result
            written += len(chunk)
    return written


@dataclass
class DocuSignDataSource:
    """DocuSign REST v2 endpoints.

    Attributes:
        client: DocuSignClient executing the calls
    """

    client: DocuSignClient

    async def _run(self, call: Call, scope: Optional[CancelScope]) -> Any:
        return await self.client.execute(call, scope)

    # ========================================================================
    # FOLDER OPERATIONS
    # ========================================================================

    async def folder_list(self, *params: QueryParam, scope: Optional[CancelScope] = None) -> FolderList:
        """List the account's folders.

        Args:
            params: ``FOLDER_TEMPLATES_INCLUDE`` or ``FOLDER_TEMPLATES_ONLY``

        Returns:
            The folders
        """
        return await self._run(
            Call("GET", "folders", query=params, result_type=FolderList), scope
        )

    async def folder_envelope_search(
        self, folder_id: str, *params: QueryParam, scope: Optional[CancelScope] = None
    ) -> FolderEnvelopeList:
        """List the envelopes of a folder.

        Args:
            folder_id: Folder to search
            params: ``folder_search_*`` options

        Returns:
            One page of folder items
        """
        return await self._run(
            Call(
                "GET",
                "folders/{folderId}",
                path_params={"folderId": folder_id},
                query=params,
                result_type=FolderEnvelopeList,
            ),
            scope,
        )

    async def envelope_search(
        self, search_folder: SearchFolder, *params: QueryParam, scope: Optional[CancelScope] = None
    ) -> FolderEnvelopeList:
        """List the envelopes of a search folder (drafts, awaiting signature...)"""
        return await self._run(
            Call(
                "GET",
                "search_folders/{searchFolder}",
                path_params={"searchFolder": SearchFolder(search_folder).value},
                query=params,
                result_type=FolderEnvelopeList,
            ),
            scope,
        )

    async def envelope_move(
        self, to_folder_id: str, *envelope_ids: str, scope: Optional[CancelScope] = None
    ) -> None:
        """Move envelopes into a folder. ``recyclebin`` deletes them."""
        await self._run(
            Call(
                "PUT",
                "folders/{folderId}",
                path_params={"folderId": to_folder_id},
                payload={"envelopeIds": list(envelope_ids)},
            ),
            scope,
        )

    # ========================================================================
    # ENVELOPE OPERATIONS
    # ========================================================================

    async def envelope_create(
        self, envelope: Envelope, *files: UploadFile, scope: Optional[CancelScope] = None
    ) -> EnvelopeSummary:
        """Create an envelope, sent or saved as draft depending on its status.

        Args:
            envelope: Envelope definition
            files: Document contents, matched to ``envelope.documents`` by id

        Returns:
            Summary with the new envelope id
        """
        return await self._run(
            Call("POST", "envelopes", payload=envelope, files=files, result_type=EnvelopeSummary),
            scope,
        )

    async def envelope_status_changes(
        self, *params: QueryParam, scope: Optional[CancelScope] = None
    ) -> EnvelopeList:
        """Envelope status changes matching the ``status_change_*`` options"""
        return await self._run(
            Call("GET", "envelopes", query=params, result_type=EnvelopeList), scope
        )

    async def envelope_status(self, envelope_id: str, *, scope: Optional[CancelScope] = None) -> EnvelopeUris:
        return await self._run(
            Call(
                "GET",
                "envelopes/{envelopeId}",
                path_params={"envelopeId": envelope_id},
                result_type=EnvelopeUris,
            ),
            scope,
        )

    async def envelope_status_multi(
        self, *envelope_ids: str, scope: Optional[CancelScope] = None
    ) -> List[EnvelopeUris]:
        """Status of several envelopes in one call"""
        result: EnvelopeStatusList = await self._run(
            Call(
                "PUT",
                "envelopes/status",
                query=[QueryParam("envelope_ids", "request_body")],
                payload=EnvelopeIdList(envelope_ids=list(envelope_ids)),
                result_type=EnvelopeStatusList,
            ),
            scope,
        )
        return result.envelopes

    async def envelope_audit_events(
        self, envelope_id: str, *, scope: Optional[CancelScope] = None
    ) -> AuditEventList:
        return await self._run(
            Call(
                "GET",
                "envelopes/{envelopeId}/audit_events",
                path_params={"envelopeId": envelope_id},
                result_type=AuditEventList,
            ),
            scope,
        )

    async def envelope_notification(
        self, envelope_id: str, *, scope: Optional[CancelScope] = None
    ) -> Notification:
        return await self._run(
            Call(
                "GET",
                "envelopes/{envelopeId}/notification",
                path_params={"envelopeId": envelope_id},
                result_type=Notification,
            ),
            scope,
        )

    async def envelope_templates(
        self, envelope_id: str, *, scope: Optional[CancelScope] = None
    ) -> TemplateList:
        """Templates used to create the envelope"""
        return await self._run(
            Call(
                "GET",
                "envelopes/{envelopeId}/templates",
                path_params={"envelopeId": envelope_id},
                result_type=TemplateList,
            ),
            scope,
        )

    # ========================================================================
    # ENVELOPE CUSTOM FIELDS
    # ========================================================================

    def _envelope_custom_fields_call(
        self, method: str, envelope_id: str, fields: Optional[CustomFieldList] = None
    ) -> Call:
        return Call(
            method,
            "envelopes/{envelopeId}/custom_fields",
            path_params={"envelopeId": envelope_id},
            payload=fields,
            result_type=CustomFieldList,
        )

    async def envelope_custom_fields(
        self, envelope_id: str, *, scope: Optional[CancelScope] = None
    ) -> CustomFieldList:
        return await self._run(self._envelope_custom_fields_call("GET", envelope_id), scope)

    async def envelope_add_custom_fields(
        self, envelope_id: str, fields: CustomFieldList, *, scope: Optional[CancelScope] = None
    ) -> CustomFieldList:
        return await self._run(self._envelope_custom_fields_call("POST", envelope_id, fields), scope)

    async def envelope_modify_custom_fields(
        self, envelope_id: str, fields: CustomFieldList, *, scope: Optional[CancelScope] = None
    ) -> CustomFieldList:
        return await self._run(self._envelope_custom_fields_call("PUT", envelope_id, fields), scope)

    async def envelope_remove_custom_fields(
        self, envelope_id: str, fields: CustomFieldList, *, scope: Optional[CancelScope] = None
    ) -> CustomFieldList:
        return await self._run(self._envelope_custom_fields_call("DELETE", envelope_id, fields), scope)

    # ========================================================================
    # DOCUMENT OPERATIONS
    # ========================================================================

    async def envelope_documents(
        self, envelope_id: str, *, scope: Optional[CancelScope] = None
    ) -> DocumentAssetList:
        return await self._run(
            Call(
                "GET",
                "envelopes/{envelopeId}/documents",
                path_params={"envelopeId": envelope_id},
                result_type=DocumentAssetList,
            ),
            scope,
        )

    async def envelope_document(
        self,
        output: Any,
        envelope_id: str,
        document_id: str,
        *params: QueryParam,
        scope: Optional[CancelScope] = None,
    ) -> int:
        """Download one document of an envelope.

        Args:
            output: Object with a ``write`` method (plain or coroutine)
            envelope_id: Envelope holding the document
            document_id: Document to download, ``certificate`` for the certificate
            params: ``DOCUMENT_SHOW_CHANGES``

        Returns:
            Number of bytes written
        """
        response = await self._run(
            Call(
                "GET",
                "envelopes/{envelopeId}/documents/{documentId}",
                path_params={"envelopeId": envelope_id, "documentId": document_id},
                query=params,
                raw=True,
            ),
            scope,
        )
        return await _copy(response, output)

    async def envelope_documents_combined(
        self, output: Any, envelope_id: str, *params: QueryParam, scope: Optional[CancelScope] = None
    ) -> int:
        """Download all documents of an envelope as one PDF.

        Args:
            output: Object with a ``write`` method (plain or coroutine)
            envelope_id: Envelope to download
            params: ``COMBINED_*`` options

        Returns:
            Number of bytes written
        """
        response = await self._run(
            Call(
                "GET",
                "envelopes/{envelopeId}/documents/combined",
                path_params={"envelopeId": envelope_id},
                query=params,
                raw=True,
            ),
            scope,
        )
        return await _copy(response, output)

    async def envelope_set_documents(
        self,
        envelope_id: str,
        documents: DocumentList,
        *files: UploadFile,
        scope: Optional[CancelScope] = None,
    ) -> DocumentAssetList:
        """Add or replace documents of a draft envelope"""
        return await self._run(
            Call(
                "PUT",
                "envelopes/{envelopeId}/documents",
                path_params={"envelopeId": envelope_id},
                payload=documents,
                files=files,
                result_type=DocumentAssetList,
            ),
            scope,
        )

    async def envelope_remove_documents(
        self, envelope_id: str, documents: DocumentList, *, scope: Optional[CancelScope] = None
    ) -> DocumentAssetList:
        return await self._run(
            Call(
                "DELETE",
                "envelopes/{envelopeId}/documents",
                path_params={"envelopeId": envelope_id},
                payload=documents,
                result_type=DocumentAssetList,
            ),
            scope,
        )

    def _document_fields_call(
        self, method: str, envelope_id: str, document_id: str, fields: DocumentFieldList
    ) -> Call:
        return Call(
            method,
            "envelopes/{envelopeId}/documents/{documentId}/fields",
            path_params={"envelopeId": envelope_id, "documentId": document_id},
            payload=fields,
            result_type=DocumentFieldList,
        )

    async def document_add_custom_fields(
        self,
        envelope_id: str,
        document_id: str,
        fields: DocumentFieldList,
        *,
        scope: Optional[CancelScope] = None,
    ) -> DocumentFieldList:
        return await self._run(self._document_fields_call("POST", envelope_id, document_id, fields), scope)

    async def document_modify_custom_fields(
        self,
        envelope_id: str,
        document_id: str,
        fields: DocumentFieldList,
        *,
        scope: Optional[CancelScope] = None,
    ) -> DocumentFieldList:
        return await self._run(self._document_fields_call("PUT", envelope_id, document_id, fields), scope)

    async def document_remove_custom_fields(
        self,
        envelope_id: str,
        document_id: str,
        fields: DocumentFieldList,
        *,
        scope: Optional[CancelScope] = None,
    ) -> DocumentFieldList:
        return await self._run(self._document_fields_call("DELETE", envelope_id, document_id, fields), scope)

    # ========================================================================
    # RECIPIENT OPERATIONS
    # ========================================================================

    def _recipients_call(
        self,
        method: str,
        envelope_id: str,
        recipients: Optional[RecipientList],
        params: Sequence[QueryParam],
        result_type: Any = RecipientList,
    ) -> Call:
        return Call(
            method,
            "envelopes/{envelopeId}/recipients",
            path_params={"envelopeId": envelope_id},
            query=params,
            payload=recipients,
            result_type=result_type,
        )

    async def recipients(
        self, envelope_id: str, *params: QueryParam, scope: Optional[CancelScope] = None
    ) -> RecipientList:
        """Recipients of an envelope.

        Args:
            envelope_id: The envelope ID
            params: ``RECIPIENTS_INCLUDE_TABS``, ``RECIPIENTS_INCLUDE_EXTENDED``

        Returns:
            The recipients grouped by kind
        """
        return await self._run(self._recipients_call("GET", envelope_id, None, params), scope)

    async def recipients_add(
        self,
        envelope_id: str,
        recipients: RecipientList,
        *params: QueryParam,
        scope: Optional[CancelScope] = None,
    ) -> RecipientList:
        """Add recipients. A failed recipient carries its ``error_details``."""
        return await self._run(self._recipients_call("POST", envelope_id, recipients, params), scope)

    async def recipients_modify(
        self,
        envelope_id: str,
        recipients: RecipientList,
        *params: QueryParam,
        scope: Optional[CancelScope] = None,
    ) -> RecipientUpdateResult:
        return await self._run(
            self._recipients_call("PUT", envelope_id, recipients, params, RecipientUpdateResult),
            scope,
        )

    async def recipients_remove(
        self, envelope_id: str, recipients: RecipientList, *, scope: Optional[CancelScope] = None
    ) -> RecipientList:
        return await self._run(self._recipients_call("DELETE", envelope_id, recipients, ()), scope)

    def _tabs_call(self, method: str, envelope_id: str, recipient_id: str, tabs: Optional[Tabs]) -> Call:
        return Call(
            method,
            "envelopes/{envelopeId}/recipients/{recipientId}/tabs",
            path_params={"envelopeId": envelope_id, "recipientId": recipient_id},
            payload=tabs,
            result_type=Tabs,
        )

    async def recipient_tabs(
        self, envelope_id: str, recipient_id: str, *, scope: Optional[CancelScope] = None
    ) -> Tabs:
        return await self._run(self._tabs_call("GET", envelope_id, recipient_id, None), scope)

    async def recipient_tabs_add(
        self, envelope_id: str, recipient_id: str, tabs: Tabs, *, scope: Optional[CancelScope] = None
    ) -> Tabs:
        return await self._run(self._tabs_call("POST", envelope_id, recipient_id, tabs), scope)

    async def recipient_tabs_modify(
        self, envelope_id: str, recipient_id: str, tabs: Tabs, *, scope: Optional[CancelScope] = None
    ) -> Tabs:
        return await self._run(self._tabs_call("PUT", envelope_id, recipient_id, tabs), scope)

    async def recipient_tabs_remove(
        self, envelope_id: str, recipient_id: str, tabs: Tabs, *, scope: Optional[CancelScope] = None
    ) -> Tabs:
        return await self._run(self._tabs_call("DELETE", envelope_id, recipient_id, tabs), scope)

    # ========================================================================
    # TEMPLATE OPERATIONS
    # ========================================================================

    async def template_search(
        self, *params: QueryParam, scope: Optional[CancelScope] = None
    ) -> FolderTemplateList:
        """Search the account's templates with ``template_search_*`` options"""
        return await self._run(
            Call("GET", "templates", query=params, result_type=FolderTemplateList), scope
        )

    async def get_template(self, template_id: str, *, scope: Optional[CancelScope] = None) -> Template:
        return await self._run(
            Call(
                "GET",
                "templates/{templateId}",
                path_params={"templateId": template_id},
                result_type=Template,
            ),
            scope,
        )

    # ========================================================================
    # VIEWS
    # ========================================================================

    def _view_call(self, envelope_id: str, view: str, payload: DocuSignModel) -> Call:
        return Call(
            "POST",
            "envelopes/{envelopeId}/views/" + view,
            path_params={"envelopeId": envelope_id},
            payload=payload,
            result_type=EnvelopeUrl,
        )

    async def envelope_correction(
        self,
        envelope_id: str,
        return_url: str,
        suppress_navigation: bool = False,
        *,
        scope: Optional[CancelScope] = None,
    ) -> EnvelopeUrl:
        """URL of the correction view of a sent envelope.

        Args:
            envelope_id: Envelope to correct
            return_url: Where the sender is sent when the view closes
            suppress_navigation: Hide the navigation of the view

        Returns:
            The view URL
        """
        request = CorrectionViewRequest(
            return_url=return_url,
            suppress_navigation="true" if suppress_navigation else "",
        )
        return await self._run(self._view_call(envelope_id, "correct", request), scope)

    async def recipient_view(
        self, envelope_id: str, view: RecipientViewRequest, *, scope: Optional[CancelScope] = None
    ) -> EnvelopeUrl:
        """URL of the embedded signing view of a recipient"""
        return await self._run(self._view_call(envelope_id, "recipient", view), scope)

    async def sender_view(
        self, envelope_id: str, return_url: str, *, scope: Optional[CancelScope] = None
    ) -> EnvelopeUrl:
        """URL of the sender view of a draft envelope"""
        return await self._run(
            self._view_call(envelope_id, "sender", ReturnUrlRequest(return_url=return_url)), scope
        )

    async def edit_view(
        self, envelope_id: str, return_url: str, *, scope: Optional[CancelScope] = None
    ) -> EnvelopeUrl:
        """URL of the edit view of a sent envelope"""
        return await self._run(
            self._view_call(envelope_id, "edit", ReturnUrlRequest(return_url=return_url)), scope
        )

    # ========================================================================
    # ACCOUNT OPERATIONS
    # ========================================================================

    async def login_information(
        self, *params: QueryParam, scope: Optional[CancelScope] = None
    ) -> LoginInformation:
        """Accounts available to the credential.

        The only call resolved against the API root rather than an account.
        """
        return await self._run(
            Call("GET", "/login_information", query=params, result_type=LoginInformation), scope
        )

    async def account_custom_fields(self, *, scope: Optional[CancelScope] = None) -> CustomFieldList:
        """Custom envelope fields defined at account level"""
        return await self._run(Call("GET", "custom_fields", result_type=CustomFieldList), scope)
