"""
Calculator Exceptions
"""

from typing import List, Union


class InvalidInputError(ValueError):
    """
    Raised when production inputs cannot produce finite metrics.

    Carries every individual problem in ``errors`` so the UI can show all
    of them at once.
    """

    def __init__(self, errors: Union[str, List[str]]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))
