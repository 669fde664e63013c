from dlsolutions.schemas.ai import (
    AnalyzeRequest,
    EmailTemplateRequest,
    GenerationMetadata,
    GenerationRequest,
    GenerationResponse,
    GenerationSettings,
    GenerationUsage,
    TextResponse,
)
from dlsolutions.schemas.contact import (
    BulkDeleteRequest,
    BulkResult,
    BulkUpdateRequest,
    ContactCreate,
    ContactFilters,
    ContactPage,
    ContactResponse,
    ContactUpdate,
    NoteCreate,
    NoteResponse,
)
from dlsolutions.schemas.contact_message import (
    ContactMessageCreate,
    ContactMessageEnvelope,
    ContactMessageListResponse,
    ContactMessageResponse,
    ContactMessageStatusUpdate,
    ContactSubmitResponse,
)
from dlsolutions.schemas.crm import (
    ActivityCreate,
    ActivityResponse,
    DealContact,
    DealCreate,
    DealResponse,
    TaskCreate,
    TaskResponse,
)
from dlsolutions.schemas.payment_method import (
    PaymentMethodCreate,
    PaymentMethodResponse,
    SuccessResponse,
)

__all__ = [
    "ActivityCreate",
    "ActivityResponse",
    "AnalyzeRequest",
    "BulkDeleteRequest",
    "BulkResult",
    "BulkUpdateRequest",
    "ContactCreate",
    "ContactFilters",
    "ContactMessageCreate",
    "ContactMessageEnvelope",
    "ContactMessageListResponse",
    "ContactMessageResponse",
    "ContactMessageStatusUpdate",
    "ContactPage",
    "ContactResponse",
    "ContactSubmitResponse",
    "ContactUpdate",
    "DealContact",
    "DealCreate",
    "DealResponse",
    "EmailTemplateRequest",
    "GenerationMetadata",
    "GenerationRequest",
    "GenerationResponse",
    "GenerationSettings",
    "GenerationUsage",
    "NoteCreate",
    "NoteResponse",
    "PaymentMethodCreate",
    "PaymentMethodResponse",
    "SuccessResponse",
    "TaskCreate",
    "TaskResponse",
    "TextResponse",
]
