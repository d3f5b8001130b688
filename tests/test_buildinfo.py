import platform
import sys

from cloudinfo.buildinfo import BuildInfo, new_build_info


def test_new_build_info_keeps_given_values():
    info = new_build_info("1.0.0", "abc123", "2019-01-01T00:00:00")
    assert info.version == "1.0.0"
    assert info.commit_hash == "abc123"
    assert info.build_date == "2019-01-01T00:00:00"


def test_new_build_info_reports_running_interpreter():
    info = new_build_info("1.0.0", "abc123", "today")
    assert info.os == sys.platform
    assert info.runtime_version == platform.python_version()
    assert info.arch == platform.machine()
    assert info.compiler == platform.python_implementation()


def test_fields_contains_every_attribute():
    info = BuildInfo("v2", "deadbeef", "now", "3.10.0", "linux", "x86_64", "CPython")
    fields = info.fields()
    assert set(fields) == {
        "version",
        "commit_hash",
        "build_date",
        "runtime_version",
        "os",
        "arch",
        "compiler",
    }
    assert fields["version"] == "v2"
    assert fields["commit_hash"] == "deadbeef"
    assert fields["build_date"] == "now"
    assert fields["os"] == "linux"


def test_fields_round_trip():
    info = new_build_info("1.2.3", "cafe", "then")
    assert BuildInfo(**info.fields()) == info