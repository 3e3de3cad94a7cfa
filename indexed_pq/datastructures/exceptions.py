class InvalidCapacityError(ValueError):
    """Raised when a structure is constructed with an unusable size.

    A hash index needs a prime table size; a heap needs a max size of at
    least one. No object is produced when this is raised.
    """
