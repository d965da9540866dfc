from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .billing.calculator.standard_calculator import StandardBillingCalculator
from .billing.mysql_presence_repository import MySQLPresenceRepository
from .billing.service import BillingService
from .core.constants import FULL_DAY_HOURS, FULL_DAY_RATE, HOURLY_RATE, NOTIFICATION_RETENTION_DAYS, TAX_RATE
from .database.connection import DBConfig, DatabaseConnection
from .notifications.mysql_notification_repository import MySQLNotificationRepository
from .notifications.service import NotificationService
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    notifications_repo: MySQLNotificationRepository
    presence_repo: MySQLPresenceRepository

    auth_service: AuthService
    user_service: UserService
    notification_service: NotificationService
    billing_service: BillingService


def build_container(*, db_config: dict, billing: dict | None = None, retention_days: int = NOTIFICATION_RETENTION_DAYS) -> Container:
    billing = billing or {}
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    users_repo = MySQLUserRepository(conn)
    notifications_repo = MySQLNotificationRepository(conn)
    presence_repo = MySQLPresenceRepository(conn)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo)
    notification_service = NotificationService(notifications_repo, users_repo, retention_days=retention_days)
    billing_service = BillingService(
        presence_repo,
        calculator=StandardBillingCalculator(
            hourly_rate=Decimal(str(billing.get("hourly_rate", HOURLY_RATE))),
            full_day_hours=int(billing.get("full_day_hours", FULL_DAY_HOURS)),
            full_day_rate=Decimal(str(billing.get("full_day_rate", FULL_DAY_RATE))),
        ),
        tax_rate=billing.get("tax_rate", TAX_RATE),
        notifications=notification_service,
    )

    return Container(
        conn=conn,
        users_repo=users_repo,
        notifications_repo=notifications_repo,
        presence_repo=presence_repo,
        auth_service=auth_service,
        user_service=user_service,
        notification_service=notification_service,
        billing_service=billing_service,
    )
