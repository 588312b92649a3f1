from chronos import Interval


def test_new(benchmark):
    benchmark(Interval, years=4, months=3, weeks=6, days=7, hours=8)


def test_add(benchmark):
    a = Interval.create(4, 3, 6, 7, 8, 10, 11)
    b = Interval(years=2, months=1, days=5, hours=22, minutes=33, seconds=44)
    benchmark(a.add, b)


def test_parse(benchmark):
    benchmark(Interval.parse_common_iso, "P2Y1M5DT22H33M44S")


def test_format(benchmark):
    i = Interval.create(4, 3, 6, 7, 8, 10, 11)
    benchmark(i.format_common_iso)
