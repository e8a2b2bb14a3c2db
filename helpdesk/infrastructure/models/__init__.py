"""ORM models used by the application infrastructure."""

from .email_template import EmailTemplateModel
from .front_page import FrontPageModel
from .role import RoleModel
from .setting import SettingModel
from .ticket import TicketModel
from .ticket_lookup import (
    CategoryModel,
    DepartmentModel,
    PriorityModel,
    StatusModel,
    TicketTypeModel,
)
from .user import UserModel

__all__ = [
    "CategoryModel",
    "DepartmentModel",
    "EmailTemplateModel",
    "FrontPageModel",
    "PriorityModel",
    "RoleModel",
    "SettingModel",
    "StatusModel",
    "TicketModel",
    "TicketTypeModel",
    "UserModel",
]
