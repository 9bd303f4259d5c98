# tests/test_language_support.py

# local imports
from ContextEngine.core.language_support import (
    identifiers_for_path,
    javascript_identifiers,
    swift_identifiers,
)


def test_swift_declarations_then_calls():
    source = (
        "protocol Loader {}\n"
        "struct Feed: Loader {\n"
        "    func load() {\n"
        "        if ready() { refresh(items) }\n"
        "        let view = FeedView()\n"
        "    }\n"
        "}\n"
    )
    assert swift_identifiers(source) == ["Loader", "Feed", "load", "ready", "refresh"]


def test_javascript_calls_then_constructors():
    source = "async function sync() {\n  if (ok) { await push(new Queue()); }\n  return Builder(config);\n}\n"
    assert javascript_identifiers(source) == ["sync", "push", "Queue", "Builder"]


def test_identifiers_by_suffix():
    assert identifiers_for_path("a.swift", "enum Mode {}") == ["Mode"]
    assert identifiers_for_path("a.MJS", "run()") == ["run"]
    assert identifiers_for_path("a.m", "[self run];") == []
    assert identifiers_for_path("README", "run()") == []
