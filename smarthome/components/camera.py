from smarthome.components.base import Kind, SmartDevice, Status, format_bool


class Camera(SmartDevice):
    """
    Chargeable security camera.

    Tracks recording state and a pan angle; the angle is only ever set
    after the interpreter checked it against MIN_ANGLE..MAX_ANGLE.
    """

    KIND = Kind.CAMERA

    MIN_ANGLE = -60
    MAX_ANGLE = 60

    def __init__(self, device_id, status=Status.ON, charging=False,
                 recording=False, angle=45):
        super().__init__(device_id, status, charging)
        self.recording = recording
        self.angle = angle

    def set_angle(self, angle):
        self.angle = angle
        return True

    def start_recording(self):
        self.recording = True
        return True

    def stop_recording(self):
        self.recording = False
        return True

    def is_recording(self):
        return self.recording

    def display_status(self):
        return (f"Camera {self.device_id} is {self.status.value}, "
                f"the angle is {self.angle}, "
                f"the charging status is {format_bool(self.charging)}, "
                f"and the recording status is {format_bool(self.recording)}.")
