"""Custom exceptions for the Mail Notifier."""


class MailNotifierError(Exception):
    """Base exception for all Mail Notifier errors."""


class ParseError(MailNotifierError):
    """Failed to turn raw message data into a message snapshot."""


class CollaboratorContractError(MailNotifierError):
    """A collaborator returned a value its contract does not allow."""
