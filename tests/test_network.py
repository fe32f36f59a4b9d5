"""
Unit tests for isilon_mount.network module.
"""

from isilon_mount.network import check_reachability, ping_command

from .conftest import FakeExecutor


class TestPingCommand:
    def test_linux_form(self):
        assert ping_command("data.ucdenver.pvt", system="Linux") == [
            "ping",
            "-c",
            "1",
            "-W",
            "1",
            "data.ucdenver.pvt",
        ]

    def test_darwin_uses_deadline(self):
        assert ping_command("data.ucdenver.pvt", 2, system="Darwin") == [
            "ping",
            "-c",
            "1",
            "-t",
            "2",
            "data.ucdenver.pvt",
        ]


class TestCheckReachability:
    def test_reachable(self):
        executor = FakeExecutor()

        assert check_reachability("data.ucdenver.pvt", executor, system="Linux") is True
        assert executor.calls == [(["ping", "-c", "1", "-W", "1", "data.ucdenver.pvt"], False)]

    def test_unreachable(self):
        executor = FakeExecutor(statuses={"ping": 2})

        assert check_reachability("data.ucdenver.pvt", executor, system="Linux") is False

    def test_single_probe(self):
        executor = FakeExecutor(statuses={"ping": 1})

        check_reachability("data.ucdenver.pvt", executor, system="Linux")

        assert len(executor.calls) == 1
