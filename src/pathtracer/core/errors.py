# core/errors.py


class SceneFormatError(ValueError):
    """
    Raised when a scene description is malformed: a missing field, a value
    of the wrong type or a vector without exactly three components.
    """
