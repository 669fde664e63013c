from dlsolutions.repositories.activity_repository import ActivityRepository
from dlsolutions.repositories.contact_message_repository import ContactMessageRepository
from dlsolutions.repositories.contact_repository import ContactRepository
from dlsolutions.repositories.customer_link_repository import CustomerLinkRepository
from dlsolutions.repositories.deal_repository import DealRepository
from dlsolutions.repositories.payment_method_repository import PaymentMethodRepository
from dlsolutions.repositories.task_repository import TaskRepository

__all__ = [
    "ActivityRepository",
    "ContactMessageRepository",
    "ContactRepository",
    "CustomerLinkRepository",
    "DealRepository",
    "PaymentMethodRepository",
    "TaskRepository",
]
