"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class PublishError(AdapterError):
    """Event could not be handed to the message broker."""

    pass
