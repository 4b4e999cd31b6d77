from siteadmin.client.api_client import AdminApiClient
from siteadmin.client.controller import FormMode, ResourceController
from siteadmin.client.ordered import OrderedChildrenEditor, SiblingOrderEditor

__all__ = [
    "AdminApiClient",
    "FormMode",
    "ResourceController",
    "OrderedChildrenEditor",
    "SiblingOrderEditor",
]
