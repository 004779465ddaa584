from drillsargeant.services.watch_service import WatchService


def test_watch_acknowledges_path():
    msg = WatchService().watch("X")
    assert "Started monitoring" in msg
    assert "X" in msg


def test_watch_accepts_any_string():
    svc = WatchService()
    assert svc.watch("") == "Started monitoring: "
    assert svc.watch("/no/such/dir") == "Started monitoring: /no/such/dir"


def test_watch_twice_registers_once():
    svc = WatchService()
    svc.watch("/a")
    assert svc.watch("/a") == "Started monitoring: /a"
    assert svc.list() == ["/a"]


def test_list_is_sorted():
    svc = WatchService()
    for p in ("/c", "/a", "/b"):
        svc.watch(p)
    assert svc.list() == ["/a", "/b", "/c"]


def test_unwatch():
    svc = WatchService()
    svc.watch("/a")
    assert svc.unwatch("/a") == "Stopped monitoring: /a"
    assert svc.list() == []


def test_unwatch_unknown_path():
    assert WatchService().unwatch("/a") == "Not monitoring: /a"


def test_watch_is_logged(caplog):
    with caplog.at_level("INFO", logger="drillsargeant.services.watch_service"):
        WatchService().watch("/proj")
    assert any("Setting up file watcher for: /proj" in r.getMessage() for r in caplog.records)
