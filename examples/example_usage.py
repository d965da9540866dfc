"""Example: using the service layer directly (no Flask).

Controllers stay thin; access checks, billing and notifications live in services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.nursery_system.nursery_system.access.resolver import AccessControlResolver
from src.nursery_system.nursery_system.container import build_container
from src.nursery_system.nursery_system.core.enums import Role


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, billing=getattr(settings, "BILLING", None))

    access = AccessControlResolver(Role.EMPLOYEE)
    print([item.label for item in access.get_menu_items()])
    print(access.can_perform_action("payment", "create"))

    invoice = container.billing_service.build_invoice(child_id=1, start=date(2026, 2, 1), end=date(2026, 2, 28))
    print(invoice.to_dict() if invoice else "no billable attendance")


if __name__ == "__main__":
    main()
