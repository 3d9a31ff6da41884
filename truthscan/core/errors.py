class InputValidationError(ValueError):
    """Request is missing its content type or content; nothing was analyzed."""

    default_message = "Missing required fields: type and content"

    def __init__(self, message: str = default_message):
        super().__init__(message)
        self.message = message
