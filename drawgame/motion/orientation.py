"""
Face-down orientation tracking.
"""


class FaceDownSensor:
    """Tracks whether the screen points at the floor, from the Z axis.

    Gravity reads positive on Z while the device lies face-up, so a negative
    reading means face-down. A disabled sensor (no hardware) is never
    face-down.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._face_down = False

    @classmethod
    def disabled(cls) -> 'FaceDownSensor':
        return cls(enabled=False)

    def observe(self, z_value: float):
        if self.enabled:
            self._face_down = z_value < 0.0

    def is_face_down(self) -> bool:
        return self._face_down
