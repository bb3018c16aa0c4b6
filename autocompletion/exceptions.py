class OrderingError(ValueError):
  """Raised by `SortedIndex` when entries are not non-decreasing by key."""

  def __init__(self, position=None):
    self.position = position
    message = "The prefixes are not in sorted order"
    if position is not None:
      message += f" (first violation between entries {position} and {position + 1})"
    super().__init__(message)
