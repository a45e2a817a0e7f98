# localization/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Entity Not Found Errors ---

class DictionaryItemNotFoundError(DomainError):
    """Raised when a dictionary item is addressed by an id or key that does not exist."""
    def __init__(self, identifier: object):
        super().__init__(f"Dictionary item '{identifier}' not found.")

class LanguageNotFoundError(DomainError):
    """Raised when a language is addressed by an id or culture code that does not exist."""
    def __init__(self, identifier: object):
        super().__init__(f"Language '{identifier}' not found.")

# --- Dispatch Errors ---

class UnsupportedEntityError(DomainError, TypeError):
    """Raised when save/delete is handed something that is neither a DictionaryItem nor a Language."""
    def __init__(self, entity: object):
        super().__init__(
            f"Cannot persist object of type '{type(entity).__name__}'; "
            "expected DictionaryItem or Language."
        )
