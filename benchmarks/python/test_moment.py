from chronos import Interval, Moment


def test_new(benchmark):
    benchmark(
        Moment,
        2020,
        3,
        20,
        12,
        30,
        45,
        microsecond=450,
        tz="Europe/Amsterdam",
    )


def test_now(benchmark):
    benchmark(Moment.now, "Europe/Amsterdam")


def test_parse(benchmark):
    benchmark(Moment.parse, "2020-03-20T12:30:45+01:00")


def test_change_tz(benchmark):
    m = Moment(2020, 3, 20, 12, 30, 45, tz="Europe/Amsterdam")
    benchmark(m.with_timezone, "America/New_York")


def test_add_months(benchmark):
    m = Moment(2020, 1, 31, 12, 30, tz="Europe/Amsterdam")
    benchmark(m.add_months, 13)


def test_add_weekdays(benchmark):
    m = Moment(2020, 3, 20, tz="Europe/Amsterdam")
    benchmark(m.add_weekdays, 38)


def test_add_interval(benchmark):
    m = Moment(2020, 3, 20, tz="Europe/Amsterdam")
    benchmark(m.add, Interval(years=1, weeks=3, hours=7))


def test_diff(benchmark):
    a = Moment(2020, 3, 20, tz="Europe/Amsterdam")
    b = Moment(2024, 7, 1, 13, tz="Asia/Tokyo")
    benchmark(a.diff, b)


def test_start_of_week(benchmark):
    m = Moment(2020, 3, 20, 12, 30, tz="Europe/Amsterdam")
    benchmark(m.start_of_week)


def test_format_cookie(benchmark):
    m = Moment(2020, 3, 20, 12, 30, tz="Europe/Amsterdam")
    benchmark(m.to_cookie_string)
