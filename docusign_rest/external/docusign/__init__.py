"""DocuSign data source module."""
from docusign_rest.external.docusign.docusign import DocuSignDataSource, EnvelopeStatusList
from docusign_rest.external.docusign.params import SearchFolder

__all__ = ["DocuSignDataSource", "EnvelopeStatusList", "SearchFolder"]
