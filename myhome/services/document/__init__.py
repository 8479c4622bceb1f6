from myhome.services.document.house_member_document_service import (
    DocumentLimits,
    HouseMemberDocumentService,
)

__all__ = ["DocumentLimits", "HouseMemberDocumentService"]
