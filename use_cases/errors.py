"""Local validation errors. Raised before any network call is made."""


class ValidationError(ValueError):
    pass


class BudgetValidationError(ValidationError):
    pass


class ProjectNameError(ValidationError):
    pass


class PasswordMismatchError(ValidationError):
    pass
