"""Unit coverage for locale resolution against the manifest."""

from __future__ import annotations

import pytest

from routelocale.backend.config.schema import LocaleManifest
from routelocale.backend.services.localizer import (
    LocaleDescriptor,
    LocaleResolver,
    UnknownLocaleError,
)


def test_resolve_returns_catalog_identifier(manifest: LocaleManifest) -> None:
    resolver = LocaleResolver(manifest)

    assert resolver.resolve("fr") == "fr"
    assert resolver.resolve(LocaleDescriptor("en")) == "en"


def test_resolve_reports_absent_catalog(manifest: LocaleManifest) -> None:
    assert LocaleResolver(manifest).resolve("de") is None


def test_resolve_rejects_unknown_locale(manifest: LocaleManifest) -> None:
    with pytest.raises(UnknownLocaleError) as excinfo:
        LocaleResolver(manifest).resolve("pt")

    assert excinfo.value.known == ("fr", "en", "de")


def test_default_locale_names_put_default_first(manifest: LocaleManifest) -> None:
    assert LocaleResolver(manifest).default_locale_names() == ["en", "fr", "de"]
