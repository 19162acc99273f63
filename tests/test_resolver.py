import pytest

from tilde.protocols import UrlResolver
from tilde.resolver import (
    AppRootUrlResolver,
    CallableUrlResolver,
    ResolutionContractViolation,
    ResolverAdapter,
)
from tilde.values import EscapedSegment, LiteralSegment


def test_adapter_resolve_calls_resolver_once(resolver):
    adapter = ResolverAdapter(resolver)
    assert adapter.resolve("~/home/index.html") == "/approot/home/index.html"
    assert resolver.calls == ["~/home/index.html"]


def test_adapter_resolve_deferred_splits_prefix_and_remainder(resolver):
    adapter = ResolverAdapter(resolver)
    prefix, remainder = adapter.resolve_deferred("~/home/index.html")
    assert prefix == EscapedSegment("/approot/")
    assert remainder == LiteralSegment("home/index.html")
    assert resolver.calls == ["~/home/index.html"]


def test_adapter_rejects_output_without_remainder(make_resolver):
    adapter = ResolverAdapter(make_resolver("UnexpectedResult"))
    with pytest.raises(ResolutionContractViolation) as excinfo:
        adapter.resolve_deferred("~/home/index.html")
    assert "'~/home/index.html'" in str(excinfo.value)
    assert "UrlResolver.content" in str(excinfo.value)
    assert "enabled: false" in str(excinfo.value)
    assert excinfo.value.resolver_name == "UrlResolver"
    assert excinfo.value.method_name == "content"


def test_adapter_rejects_non_string_output():
    adapter = ResolverAdapter(CallableUrlResolver(lambda path: None))
    with pytest.raises(ResolutionContractViolation):
        adapter.resolve("~/a")


def test_adapter_accepts_bare_marker(make_resolver):
    adapter = ResolverAdapter(make_resolver("https://cdn.example.com/app/"))
    prefix, remainder = adapter.resolve_deferred("~/")
    assert prefix.text == "https://cdn.example.com/app/"
    assert remainder.text == ""


def test_app_root_resolver():
    assert AppRootUrlResolver("/approot").content("~/home/index.html") == "/approot/home/index.html"
    assert AppRootUrlResolver("https://cdn.example.com/").content("~/a.png") == "https://cdn.example.com/a.png"
    assert AppRootUrlResolver("").content("~/a.png") == "/a.png"
    assert AppRootUrlResolver("/approot").content("/a.png") == "/a.png"


def test_resolvers_satisfy_protocol():
    assert isinstance(AppRootUrlResolver(), UrlResolver)
    assert isinstance(CallableUrlResolver(str.upper), UrlResolver)
    assert CallableUrlResolver(str.upper).content("~/a") == "~/A"
