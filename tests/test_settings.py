import pytest

from mclay.settings import SettingError, Settings


def test_defaults_match_table():
    s = Settings()
    assert s.get("linesize") == 79
    assert s.get("maxdegree") == 512
    assert s.get("autocalc") == -1
    assert s.get("showmem") == 1
    assert s.get("verbose") == 0


def test_lookup_by_prefix():
    s = Settings()
    assert s.lookup("verb") == "verbose"
    assert s.lookup("auto") == "auto"
    assert s.lookup("autoc") == "autocalc"
    assert s.lookup("autod") == "autodegree"
    assert s.lookup("linesize") == "linesize"


@pytest.mark.parametrize("name", ["nosuch", "", "zzz"])
def test_unknown_name_raises(name):
    s = Settings()
    with pytest.raises(SettingError):
        s.lookup(name)
    with pytest.raises(SettingError):
        s.set(name, 3)


def test_set_and_get_through_abbreviation():
    s = Settings()
    assert s.set("verb", 4) == 4
    assert s.get("verbose") == 4


def test_increment_adds():
    s = Settings()
    start = s.get("timer")
    assert s.increment("timer", 3) == start + 3
    assert s.increment("timer", -1) == start + 2


def test_restore_default_and_reset():
    s = Settings()
    s.set("linesize", 20)
    s.set("prlevel", 2)
    assert s.restore_default("linesize") == 79
    assert s.get("prlevel") == 2
    s.reset()
    assert s.get("prlevel") == 0


def test_describe_lists_every_setting():
    s = Settings()
    s.set("echo", 7)
    lines = s.describe()
    assert len(lines) == 16
    assert lines[0].startswith("abort")
    echo_line = next(line for line in lines if line.startswith("echo"))
    assert echo_line[:10].rstrip() == "echo"
    assert echo_line[11:14].strip() == "7"
    assert echo_line.endswith(">0 tells Macaulay to echo all input")


def test_instances_are_independent():
    a = Settings()
    b = Settings()
    a.set("nlines", 9)
    assert b.get("nlines") == 1