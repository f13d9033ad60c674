import random
from typing import Optional

from .config import DEFAULT_CONFIG


class Die:
    """A single die producing uniform face values."""
    
    def __init__(self, rng: Optional[random.Random] = None, faces: int = DEFAULT_CONFIG.die_faces):
        self.faces = faces
        self._rng = rng or random
        self._face_value: Optional[int] = None
        
    def roll(self):
        """Roll the die."""
        self._face_value = self._rng.randint(1, self.faces)
    
    def get_face_value(self) -> Optional[int]:
        """Last rolled value, None before the first roll."""
        return self._face_value
    
    def roll_and_get_face_value(self) -> int:
        """Roll the die and return the new face value."""
        self.roll()
        return self._face_value
    
    def __str__(self) -> str:
        return f"Die({self._face_value})"
