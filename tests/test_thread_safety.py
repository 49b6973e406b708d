"""Thread safety tests for scanning and verification.

Scanning is a pure function of its input. These tests run it from many
threads at once and check every thread sees the same results as a serial
run.
"""

from concurrent.futures import ThreadPoolExecutor

from fmtcheck import check_arguments, scan

FORMATS = [
    "%d",
    "%%d",
    "Hello %s, you are %d years old",
    "%*.*f",
    "%ld %Lf %Ld",
    "100% sure %d",
    "%-+08.3f|%5s|%#x|%lln",
]


class TestConcurrentScanning:
    """Concurrent scans match serial scans."""

    def test_concurrent_scan_matches_serial(self) -> None:
        expected = {fmt: scan(fmt) for fmt in FORMATS}
        work = FORMATS * 50

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(scan, work))

        for fmt, result in zip(work, results):
            assert result == expected[fmt]

    def test_concurrent_verification(self) -> None:
        def check(i: int) -> int:
            check_arguments("%s #%d took %.1f ms", "job", i, i / 3)
            return i

        with ThreadPoolExecutor(max_workers=8) as executor:
            assert sorted(executor.map(check, range(200))) == list(range(200))
