"""Registry of every message key known to the catalog."""

from __future__ import annotations

from enum import Enum


class MessageKey(Enum):
    """Closed set of message keys.

    Each member is declared as ``(key, arity)``: ``key`` is the dotted
    identifier used in the messages files and ``arity`` the number of
    positional placeholders callers are expected to fill.
    """

    UNKNOWN_USER = ("error.unregistered_user", 0)
    NO_PERMISSION = ("error.no_permission", 0)
    UNEXPECTED_ERROR = ("error.unexpected_error", 0)
    MAX_REGISTER_EXCEEDED = ("error.max_registration", 3)
    TEMPBAN_MAX_LOGINS = ("error.tempban_max_logins", 1)
    LOGIN_SUCCESS = ("login.success", 0)
    LOGIN_REQUEST = ("login.login_request", 0)
    WRONG_PASSWORD = ("login.wrong_password", 0)
    USAGE_LOGIN = ("login.command_usage", 0)
    MUST_REGISTER_MESSAGE = ("registration.register_request", 0)
    REGISTER_SUCCESS = ("registration.success", 0)
    USAGE_REGISTER = ("registration.command_usage", 0)
    LOGOUT_SUCCESS = ("misc.logout", 0)
    ACCOUNTS_OWNED_SELF = ("misc.accounts_owned_self", 1)
    SESSION_EXPIRED = ("session.expired", 0)
    SESSION_VALID = ("session.valid_session", 0)
    EMAIL_ADDED_SUCCESS = ("email.added", 0)
    EMAIL_ALREADY_USED_ERROR = ("email.already_used", 0)
    EMAIL_COOLDOWN_ERROR = ("email.email_cooldown_error", 1)
    CAPTCHA_WRONG_ERROR = ("captcha.wrong_captcha", 1)
    USAGE_CAPTCHA = ("captcha.usage_captcha", 1)
    CAPTCHA_SUCCESS = ("captcha.valid_captcha", 0)
    TWO_FACTOR_CREATE = ("two_factor.code_created", 2)
    SECOND = ("time.second", 0)
    SECONDS = ("time.seconds", 0)
    MINUTE = ("time.minute", 0)
    MINUTES = ("time.minutes", 0)
    HOUR = ("time.hour", 0)
    HOURS = ("time.hours", 0)
    DAY = ("time.day", 0)
    DAYS = ("time.days", 0)

    def __init__(self, key: str, arity: int) -> None:
        self.key = key
        self.arity = arity

    @classmethod
    def from_path(cls, path: str) -> "MessageKey":
        for member in cls:
            if member.key == path:
                return member
        raise KeyError(f"Unknown message key path '{path}'")

    def __str__(self) -> str:
        return f"{self.name} ({self.key})"


__all__ = ["MessageKey"]
