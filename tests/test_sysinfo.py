"""Unit tests for the system information probes."""

from types import SimpleNamespace

from starshell import sysinfo


def report_dict(**kwargs):
    return dict(sysinfo.collect_report(**kwargs))


class TestProbe:
    def test_returns_value(self):
        assert sysinfo.probe(lambda: 42) == 42

    def test_failure_becomes_none(self):
        def broken():
            raise OSError("no such file")

        assert sysinfo.probe(broken) is None


class TestCollectReport:
    """Test the degraded-report behavior."""

    def test_all_fields_present(self, mocker):
        mocker.patch.object(
            sysinfo, "platform_info", return_value={"platform": "Ubuntu", "version": "24.04"}
        )
        mocker.patch.object(
            sysinfo, "kernel_info", return_value={"kernel": "6.8.0", "arch": "x86_64"}
        )
        mocker.patch.object(
            sysinfo, "cpu_info", return_value={"model": "Test CPU", "cores": 8}
        )
        mocker.patch(
            "starshell.sysinfo.psutil.virtual_memory",
            return_value=SimpleNamespace(
                total=16 * sysinfo.GIGABYTE,
                available=10 * sysinfo.GIGABYTE,
                used=6 * sysinfo.GIGABYTE,
            ),
        )
        mocker.patch(
            "starshell.sysinfo.psutil.disk_usage",
            return_value=SimpleNamespace(
                total=500 * sysinfo.GIGABYTE,
                used=200 * sysinfo.GIGABYTE,
                free=300 * sysinfo.GIGABYTE,
            ),
        )

        report = report_dict()

        assert report["OS"] == "Ubuntu"
        assert report["OS Version"] == "24.04"
        assert report["Cores"] == "8"
        assert report["Total Memory"] == "16 GB"
        assert report["Disk Free"] == "300 GB"
        assert sysinfo.UNAVAILABLE not in report.values()

    def test_report_keeps_fixed_order(self):
        labels = [label for label, _ in sysinfo.collect_report()]

        assert labels[0] == "OS"
        assert labels[-1] == "Disk Free"
        assert len(labels) == 12

    def test_missing_core_count_keeps_cpu_model(self, mocker):
        """Test that containers without a core count still report the model."""
        mocker.patch.object(sysinfo, "_cpu_model", return_value="Test CPU")
        mocker.patch("starshell.sysinfo.psutil.cpu_count", return_value=None)

        report = report_dict()

        assert report["CPU"] == "Test CPU"
        assert report["Cores"] == sysinfo.UNAVAILABLE

    def test_missing_cpu_model_keeps_core_count(self, mocker):
        mocker.patch.object(sysinfo, "_cpu_model", side_effect=LookupError("none"))
        mocker.patch("starshell.sysinfo.psutil.cpu_count", return_value=4)

        report = report_dict()

        assert report["CPU"] == sysinfo.UNAVAILABLE
        assert report["Cores"] == "4"

    def test_disk_failure_only_affects_disk(self, mocker):
        mocker.patch(
            "starshell.sysinfo.psutil.disk_usage", side_effect=PermissionError("denied")
        )

        report = report_dict()

        assert report["Disk Total"] == sysinfo.UNAVAILABLE
        assert report["Disk Used"] == sysinfo.UNAVAILABLE
        assert report["Kernel"] != sysinfo.UNAVAILABLE

    def test_every_probe_failing(self, mocker):
        for name in ["platform_info", "kernel_info", "cpu_info", "memory_info", "disk_info"]:
            mocker.patch.object(sysinfo, name, side_effect=RuntimeError(name))

        report = report_dict()

        assert set(report.values()) == {sysinfo.UNAVAILABLE}


def test_bytes_to_gb():
    assert sysinfo.bytes_to_gb(3 * sysinfo.GIGABYTE + 5) == 3
