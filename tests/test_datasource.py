"""
Tests for the typed endpoint wrappers.
"""
import io
import json
from datetime import datetime
from urllib.parse import parse_qsl

import pytest

from docusign_rest.client.docusign.multipart import UploadFile
from docusign_rest.external.docusign import params
from docusign_rest.external.docusign.params import SearchFolder
from docusign_rest.models.documents import Document, DocumentField, DocumentFieldList
from docusign_rest.models.envelopes import Envelope
from docusign_rest.models.recipients import RecipientList, Signer
from docusign_rest.models.tabs import SignHereTab, Tabs
from docusign_rest.models.views import RecipientViewRequest
from tests.fixtures.mock_docusign import split_multipart

ROOT = "https://demo.docusign.net/restapi/v2"


def account_url(account_id: str, path: str) -> str:
    return f"{ROOT}/accounts/{account_id}/{path}"


class TestFolders:
    @pytest.mark.asyncio
    async def test_folder_list(self, data_source, mock_docusign, account_id):
        mock_docusign.respond(200, {"folders": [{"name": "Draft", "folderId": "d1", "folders": [{"name": "Sub"}]}]})

        result = await data_source.folder_list(params.FOLDER_TEMPLATES_INCLUDE)

        assert result.folders[0].name == "Draft"
        assert result.folders[0].folders[0].name == "Sub"
        assert str(mock_docusign.last_request.url) == account_url(account_id, "folders?template=include")

    @pytest.mark.asyncio
    async def test_folder_envelope_search(self, data_source, mock_docusign, account_id):
        mock_docusign.respond(
            200,
            {
                "resultSetSize": "1",
                "folderItems": [
                    {"envelopeId": "e1", "status": "sent", "sentDateTime": "2014-03-03T16:08:12.1234567Z"}
                ],
            },
        )

        result = await data_source.folder_envelope_search(
            "inbox",
            params.folder_search_start_position(10),
            params.folder_search_from_date(datetime(2015, 1, 2, 3, 4)),
        )

        assert result.result_set_size == "1"
        assert result.folder_items[0].sent_date_time.year == 2014
        url = mock_docusign.last_request.url
        assert url.path.endswith("/folders/inbox")
        assert parse_qsl(url.query.decode()) == [("start_position", "10"), ("from_date", "01/02/2015 03:04")]

    @pytest.mark.asyncio
    async def test_envelope_search(self, data_source, mock_docusign):
        await data_source.envelope_search(
            SearchFolder.AWAITING_MY_SIGNATURE,
            params.ENVELOPE_SEARCH_ORDER_BY_CREATED,
            params.ENVELOPE_SEARCH_INCLUDE_RECIPIENTS,
        )

        url = mock_docusign.last_request.url
        assert url.path.endswith("/search_folders/awaiting_my_signature")
        assert parse_qsl(url.query.decode()) == [("order_by", "created"), ("include_recipients", "true")]

    @pytest.mark.asyncio
    async def test_envelope_move(self, data_source, mock_docusign):
        result = await data_source.envelope_move("recyclebin", "e1", "e2")

        request = mock_docusign.last_request
        assert result is None
        assert request.method == "PUT"
        assert request.url.path.endswith("/folders/recyclebin")
        assert mock_docusign.last_json() == {"envelopeIds": ["e1", "e2"]}


class TestEnvelopes:
    @pytest.mark.asyncio
    async def test_envelope_create_with_document(self, data_source, mock_docusign, account_id):
        mock_docusign.respond(
            201,
            {"envelopeId": "e1", "status": "sent", "statusDateTime": "2015-06-30T10:00:00.5Z", "uri": "/envelopes/e1"},
        )
        envelope = Envelope(
            email_subject="Please sign",
            status="sent",
            documents=[Document(name="contract.pdf", document_id="1")],
            recipients=RecipientList(
                signers=[
                    Signer(
                        email="signer@example.com",
                        name="Signer",
                        recipient_id="1",
                        tabs=Tabs(sign_here_tabs=[SignHereTab(document_id="1", page_number="1", x_position="100")]),
                    )
                ]
            ),
        )

        summary = await data_source.envelope_create(
            envelope, UploadFile("application/pdf", "contract.pdf", "1", io.BytesIO(b"%PDF-1.4"))
        )

        assert summary.envelope_id == "e1"
        assert summary.status_date_time.microsecond == 500000
        request = mock_docusign.last_request
        assert str(request.url) == account_url(account_id, "envelopes")
        parts = split_multipart(request.content, request.headers["Content-Type"])
        payload = json.loads(parts[0][1])
        assert payload["emailSubject"] == "Please sign"
        assert payload["documents"] == [{"name": "contract.pdf", "documentId": "1"}]
        signer = payload["recipients"]["signers"][0]
        assert signer["recipientId"] == "1"
        assert signer["tabs"]["signHereTabs"][0]["xPosition"] == "100"
        assert parts[1] == (
            {"Content-Disposition": 'file; filename="contract.pdf";documentid=1', "Content-Type": "application/pdf"},
            b"%PDF-1.4",
        )

    @pytest.mark.asyncio
    async def test_envelope_status_multi(self, data_source, mock_docusign):
        mock_docusign.respond(200, {"envelopes": [{"envelopeId": "e1", "status": "sent"}, {"envelopeId": "e2"}]})

        result = await data_source.envelope_status_multi("e1", "e2")

        assert [uris.envelope_id for uris in result] == ["e1", "e2"]
        request = mock_docusign.last_request
        assert request.method == "PUT"
        assert request.url.path.endswith("/envelopes/status")
        assert request.url.query == b"envelope_ids=request_body"
        assert mock_docusign.last_json() == {"envelopeIds": ["e1", "e2"]}

    @pytest.mark.asyncio
    async def test_envelope_status_changes_query(self, data_source, mock_docusign):
        mock_docusign.respond(200, {"envelopes": [], "resultSetSize": "0"})

        result = await data_source.envelope_status_changes(
            params.status_change_status("completed"),
            params.status_change_custom_field("order", "42"),
            params.status_change_transaction_ids("t1", "t2"),
            params.status_change_status("sent"),
        )

        assert result.result_set_size == "0"
        assert parse_qsl(mock_docusign.last_request.url.query.decode()) == [
            ("status", "completed"),
            ("custom_field", "order=42"),
            ("transaction_ids", "t1,t2"),
            ("status", "sent"),
        ]

    @pytest.mark.asyncio
    async def test_audit_events(self, data_source, mock_docusign):
        mock_docusign.respond(
            200,
            {"auditEvents": [{"eventFields": [{"name": "Action", "value": "Sent"}, {"name": "UserName", "value": "Ann"}]}]},
        )

        result = await data_source.envelope_audit_events("e1")

        assert result.audit_events[0].as_dict() == {"Action": "Sent", "UserName": "Ann"}
        assert mock_docusign.last_request.url.path.endswith("/envelopes/e1/audit_events")


class TestDocuments:
    @pytest.mark.asyncio
    async def test_envelope_document_streams_into_output(self, data_source, mock_docusign):
        content = b"%PDF-1.4" + b"x" * 200_000
        mock_docusign.respond(200, content=content, headers={"Content-Type": "application/pdf"})
        output = io.BytesIO()

        written = await data_source.envelope_document(output, "e1", "2", params.DOCUMENT_SHOW_CHANGES)

        assert written == len(content)
        assert output.getvalue() == content
        url = mock_docusign.last_request.url
        assert url.path.endswith("/envelopes/e1/documents/2")
        assert url.query == b"show_changes=true"

    @pytest.mark.asyncio
    async def test_combined_documents_async_output(self, data_source, mock_docusign):
        mock_docusign.respond(200, content=b"combined")
        received = []

        class AsyncSink:
            async def write(self, chunk):
                received.append(chunk)

        await data_source.envelope_documents_combined(AsyncSink(), "e1", params.COMBINED_CERTIFICATE)

        assert b"".join(received) == b"combined"
        assert mock_docusign.last_request.url.path.endswith("/envelopes/e1/documents/combined")

    @pytest.mark.asyncio
    async def test_document_custom_fields(self, data_source, mock_docusign):
        mock_docusign.respond(
            200,
            {"documentFields": [{"name": "f", "value": "v", "errorDetails": {"errorCode": "X", "message": "m"}}]},
        )

        result = await data_source.document_add_custom_fields(
            "e1", "3", DocumentFieldList(document_fields=[DocumentField(name="f", value="v")])
        )

        assert result.document_fields[0].error_details.error_code == "X"
        request = mock_docusign.last_request
        assert request.method == "POST"
        assert request.url.path.endswith("/envelopes/e1/documents/3/fields")
        assert mock_docusign.last_json() == {"documentFields": [{"name": "f", "value": "v"}]}


class TestRecipients:
    @pytest.mark.asyncio
    async def test_recipients_with_tabs(self, data_source, mock_docusign):
        mock_docusign.respond(
            200,
            {
                "signers": [
                    {
                        "recipientId": "1",
                        "email": "a@example.com",
                        "requireIdLookup": "true",
                        "tabs": {
                            "textTabs": [{"tabLabel": "Company", "value": "ACME"}],
                            "radioGroupTabs": [
                                {
                                    "groupName": "choice",
                                    "radios": [
                                        {"value": "yes", "selected": "false"},
                                        {"value": "no", "selected": "true"},
                                    ],
                                }
                            ],
                        },
                    }
                ],
                "recipientCount": "1",
            },
        )

        result = await data_source.recipients("e1", params.RECIPIENTS_INCLUDE_TABS)

        signer = result.signers[0]
        assert signer.require_id_lookup is True
        assert [(nv.name, nv.value) for nv in result.values()] == [("choice", "no"), ("Company", "ACME")]
        assert mock_docusign.last_request.url.query == b"include_tabs=true"

    @pytest.mark.asyncio
    async def test_recipients_modify_result(self, data_source, mock_docusign):
        mock_docusign.respond(200, {"recipientUpdateResults": [{"recipientId": "1"}]})

        result = await data_source.recipients_modify(
            "e1", RecipientList(signers=[Signer(recipient_id="1", email="b@example.com")]), params.RECIPIENTS_RESEND
        )

        assert result.recipient_update_results[0].recipient_id == "1"
        assert mock_docusign.last_request.method == "PUT"
        assert mock_docusign.last_json() == {"signers": [{"recipientId": "1", "email": "b@example.com"}]}

    @pytest.mark.asyncio
    async def test_recipient_tabs_remove(self, data_source, mock_docusign):
        await data_source.recipient_tabs_remove("e1", "7", Tabs(sign_here_tabs=[SignHereTab(tab_id="t1")]))

        request = mock_docusign.last_request
        assert request.method == "DELETE"
        assert request.url.path.endswith("/envelopes/e1/recipients/7/tabs")
        assert mock_docusign.last_json() == {"signHereTabs": [{"tabId": "t1"}]}


class TestTemplatesAndViews:
    @pytest.mark.asyncio
    async def test_template_search_query(self, data_source, mock_docusign):
        mock_docusign.respond(200, {"envelopeTemplates": [{"templateId": "t1", "name": "NDA"}], "resultSetSize": "1"})

        result = await data_source.template_search(
            params.template_search_folder_ids("a", "b"),
            params.template_search_include(recipients=True, documents=True),
            params.TEMPLATE_SEARCH_ORDER_BY_NAME,
        )

        assert result.envelope_templates[0].name == "NDA"
        assert parse_qsl(mock_docusign.last_request.url.query.decode()) == [
            ("folder_ids", "a,b"),
            ("include", "recipients,documents"),
            ("order_by", "name"),
        ]

    @pytest.mark.asyncio
    async def test_envelope_correction(self, data_source, mock_docusign):
        mock_docusign.respond(201, {"url": "https://demo.docusign.net/view"})

        result = await data_source.envelope_correction("e1", "https://example.com/back", True)

        assert result.url == "https://demo.docusign.net/view"
        assert mock_docusign.last_request.url.path.endswith("/envelopes/e1/views/correct")
        assert mock_docusign.last_json() == {"returnUrl": "https://example.com/back", "suppressNavigation": "true"}

    @pytest.mark.asyncio
    async def test_recipient_view(self, data_source, mock_docusign):
        mock_docusign.respond(201, {"url": "https://demo.docusign.net/sign"})
        view = RecipientViewRequest(
            client_user_id="1001",
            authentication_method="email",
            email="c@example.com",
            user_name="C",
            return_url="https://example.com/done",
        )

        result = await data_source.recipient_view("e1", view)

        assert result.url == "https://demo.docusign.net/sign"
        assert mock_docusign.last_json() == {
            "clientUserId": "1001",
            "authenticationMethod": "email",
            "email": "c@example.com",
            "userName": "C",
            "returnUrl": "https://example.com/done",
        }


class TestAccount:
    @pytest.mark.asyncio
    async def test_login_information_uses_api_root(self, data_source, mock_docusign):
        mock_docusign.respond(
            200,
            {
                "loginAccounts": [
                    {"accountId": "1", "isDefault": "false"},
                    {"accountId": "2", "isDefault": "true"},
                ]
            },
        )

        info = await data_source.login_information(params.LOGIN_INCLUDE_ACCOUNT_ID_GUID)

        assert info.default_account().account_id == "2"
        assert str(mock_docusign.last_request.url) == f"{ROOT}/login_information?include_account_id_guid=true"

    @pytest.mark.asyncio
    async def test_account_custom_fields(self, data_source, mock_docusign, account_id):
        mock_docusign.respond(
            200,
            {
                "textCustomFields": [{"name": "order", "value": "42"}],
                "listCustomFields": [{"name": "region", "listItems": ["eu", "us"]}],
            },
        )

        result = await data_source.account_custom_fields()

        assert result.text_custom_fields[0].value == "42"
        assert result.list_custom_fields[0].list_items == ["eu", "us"]
        assert str(mock_docusign.last_request.url) == account_url(account_id, "custom_fields")
