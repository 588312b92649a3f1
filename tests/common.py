from chronos import Moment

AMS = "Europe/Amsterdam"


class AlwaysEqual:
    def __eq__(self, _):
        return True


class NeverEqual:
    def __eq__(self, _):
        return False


class AlwaysLarger:
    def __lt__(self, _):
        return False

    def __le__(self, _):
        return False

    def __gt__(self, _):
        return True

    def __ge__(self, _):
        return True


class AlwaysSmaller:
    def __lt__(self, _):
        return True

    def __le__(self, _):
        return True

    def __gt__(self, _):
        return False

    def __ge__(self, _):
        return False


def fields(m: Moment) -> tuple[int, int, int, int, int, int]:
    """The wall-clock fields of a moment, for compact assertions"""
    return (m.year, m.month, m.day, m.hour, m.minute, m.second)
