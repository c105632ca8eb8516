from __future__ import annotations

import pytest

from better_wagmi.envfile import WALLETCONNECT_ENV_KEY
from better_wagmi.templates import (
    LAYOUT_PATH,
    PAGE_PATH,
    PROVIDERS_PATH,
    TemplateFlavor,
    get_template_set,
)


@pytest.mark.parametrize("flavor", list(TemplateFlavor))
def test_every_flavor_writes_the_three_app_files(flavor: TemplateFlavor):
    template_set = get_template_set(flavor)
    assert template_set.flavor is flavor
    assert list(template_set.files) == [PROVIDERS_PATH, LAYOUT_PATH, PAGE_PATH]
    assert all(content.strip() for content in template_set.files.values())
    assert WALLETCONNECT_ENV_KEY in template_set.files[PROVIDERS_PATH]
    assert template_set.directories == ("src", "src/app")


def test_modern_flavor_uses_wagmi_two_api():
    template_set = get_template_set()
    providers = template_set.files[PROVIDERS_PATH]
    assert "WagmiProvider" in providers
    assert "QueryClientProvider" in providers
    assert "transports" in providers
    assert "@tanstack/react-query" in template_set.packages


def test_legacy_flavor_uses_wagmi_one_api():
    template_set = get_template_set("legacy")
    providers = template_set.files[PROVIDERS_PATH]
    assert "WagmiConfig" in providers
    assert "transports" not in providers
    assert "wagmi@1" in template_set.packages


def test_layout_wraps_children_in_provider():
    layout = get_template_set().files[LAYOUT_PATH]
    assert "import { Web3Provider } from '../providers';" in layout
    assert "<Web3Provider>" in layout
    assert "ConnectKitButton" in get_template_set().files[PAGE_PATH]


def test_template_files_cannot_be_mutated():
    with pytest.raises(TypeError):
        get_template_set().files[PAGE_PATH] = ""  # type: ignore[index]


def test_unknown_flavor_is_rejected():
    with pytest.raises(ValueError):
        get_template_set("vintage")


def test_modern_provider_keeps_indented_blank_line():
    providers = get_template_set(TemplateFlavor.MODERN).files[PROVIDERS_PATH]
    assert "    },\n    \n    walletConnectProjectId" in providers
