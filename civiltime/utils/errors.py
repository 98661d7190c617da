# civiltime/utils/errors.py
class CivilTimeError(RuntimeError):
    """
    civiltime 所有异常的基类。
    """


class InvalidInputError(CivilTimeError, ValueError):
    """
    Raised for malformed user input (ISO text, config values).
    Should NOT print traceback.
    """


class UnknownZoneError(CivilTimeError, KeyError):
    """
    HostCivilClock 不认识的时区标识。

    只由 HostCivilClock 实现抛出；resolution 路径会吸收它并回退到 UTC，
    不会传播到调用方。
    """

    def __init__(self, zone_id: str):
        super().__init__(zone_id)
        self.zone_id = zone_id

    def __str__(self) -> str:
        return f"Unknown zone: {self.zone_id!r}"
