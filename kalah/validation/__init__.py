from .board_checks import SeedConservationError, validate_board, validate_sweep

__all__ = ["SeedConservationError", "validate_board", "validate_sweep"]
