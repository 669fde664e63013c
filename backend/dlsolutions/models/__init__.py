from dlsolutions.models.activity import Activity, ActivityType, RelatedType
from dlsolutions.models.contact import Contact, ContactNote, ContactStatus
from dlsolutions.models.contact_message import ContactMessage, MessageStatus, ServiceCategory
from dlsolutions.models.customer_link import CustomerLink
from dlsolutions.models.deal import Deal, DealStage
from dlsolutions.models.payment_method import DEFAULT_HOLDER_NAME, PaymentMethod
from dlsolutions.models.task import Task, TaskPriority, TaskStatus

__all__ = [
    "DEFAULT_HOLDER_NAME",
    "Activity",
    "ActivityType",
    "Contact",
    "ContactMessage",
    "ContactNote",
    "ContactStatus",
    "CustomerLink",
    "Deal",
    "DealStage",
    "MessageStatus",
    "PaymentMethod",
    "RelatedType",
    "ServiceCategory",
    "Task",
    "TaskPriority",
    "TaskStatus",
]
