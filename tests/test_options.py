import pytest

from cprkit.options import (
    Bearer,
    CertInfo,
    File,
    Files,
    HttpVersion,
    HttpVersionCode,
    LocalPortRange,
    MultiRange,
    Range,
    ReserveSize,
    Verbose,
)


def test_range_defaults():
    r = Range()
    assert r.resume_from == 0
    assert r.finish_at == -1
    assert r.str() == "0-"


def test_range_both_bounds():
    assert Range(2, 3).str() == "2-3"


def test_range_open_end_starts_with_start():
    start = 7
    r = Range(start, None)
    assert r.str().startswith(str(start))
    assert r.str().endswith("-")


def test_range_negative_start_is_left_out():
    finish = 9
    r = Range(-1, finish)
    assert r.str() == "-" + str(finish)


def test_range_str_dunder_matches_method():
    r = Range(4, 8)
    assert str(r) == r.str()


def test_multi_range_str():
    multi = MultiRange([Range(None, 3), Range(5, 6)])
    assert multi.str() == "0-3, 5-6"


def test_multi_range_single_matches_range():
    r = Range(1, 2)
    assert MultiRange([r]).str() == r.str()
    assert len(MultiRange([r])) == 1


def test_multi_range_empty():
    assert MultiRange([]).str() == ""


def test_http_version_default():
    assert HttpVersion().code is HttpVersionCode.VERSION_NONE
    assert HttpVersion(HttpVersionCode.VERSION_2_0).code is HttpVersionCode.VERSION_2_0


def test_http_version_codes_order():
    names = [HttpVersion(code).code.name for code in HttpVersionCode]
    assert names == [
        "VERSION_NONE",
        "VERSION_1_0",
        "VERSION_1_1",
        "VERSION_2_0",
        "VERSION_2_0_TLS",
        "VERSION_2_0_PRIOR_KNOWLEDGE",
        "VERSION_3_0",
    ]


def test_file_override():
    assert not File("a.txt").has_overriden_filename()
    renamed = File("a.txt", "b.txt")
    assert renamed.has_overriden_filename()
    assert renamed.overriden_filename == "b.txt"


def test_files_from_strings():
    paths = ["one.txt", "two.txt"]
    files = Files(paths)
    assert [f.filepath for f in files] == paths
    assert len(files) == len(paths)


def test_files_single_and_append_pop():
    files = Files(File("x.bin"))
    files.append("y.bin")
    assert files[1] == File("y.bin")
    assert files.pop() == File("y.bin")
    assert files.pop() == File("x.bin")
    with pytest.raises(IndexError):
        files.pop()


def test_bearer_token():
    assert Bearer("token").token == "token"


def test_local_port_range():
    assert int(LocalPortRange(65535)) == 65535
    with pytest.raises(ValueError):
        LocalPortRange(65536)
    with pytest.raises(ValueError):
        LocalPortRange(-1)


def test_reserve_size():
    assert ReserveSize().size == 0
    assert ReserveSize(1024).size == 1024
    with pytest.raises(ValueError):
        ReserveSize(-1)


def test_verbose():
    assert Verbose().verbose is True
    assert Verbose(False).verbose is False


def test_cert_info():
    info = CertInfo(["Subject:a", "Issuer:b"])
    info.append("Version:c")
    assert list(info) == ["Subject:a", "Issuer:b", "Version:c"]
    info[0] = "Subject:z"
    assert info[0] == "Subject:z"
    assert info.pop() == "Version:c"
    assert len(info) == 2
    with pytest.raises(IndexError):
        CertInfo().pop()