"""Source files written into the generated Next.js project."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "APP_DIRECTORIES",
    "LAYOUT_PATH",
    "PAGE_PATH",
    "PROVIDERS_PATH",
    "TemplateFlavor",
    "TemplateSet",
    "get_template_set",
]


class TemplateFlavor(str, Enum):
    """API shape of the generated wallet wiring."""

    MODERN = "modern"
    """wagmi 2 / ConnectKit 1.x with explicit transports and TanStack Query."""

    LEGACY = "legacy"
    """wagmi 1 / ConnectKit 1.5 using ``WagmiConfig`` and an Alchemy id."""


PROVIDERS_PATH = "src/providers.tsx"
LAYOUT_PATH = "src/app/layout.tsx"
PAGE_PATH = "src/app/page.tsx"

APP_DIRECTORIES: tuple[str, ...] = ("src", "src/app")


MODERN_PROVIDERS_TEMPLATE = """'use client';

import { createConfig, WagmiProvider, http } from 'wagmi';
import { mainnet, sepolia } from 'wagmi/chains';
import { ConnectKitProvider, getDefaultConfig } from 'connectkit';
import { QueryClient, QueryClientProvider } from '@tanstack/react-query';

const queryClient = new QueryClient();

const config = createConfig(
  getDefaultConfig({
    appName: 'My Web3 App',
    appUrl: "https://example.com",
    appIcon: "https://example.com/icon.png",
    appDescription: "Ready, set, connect!",
    chains: [mainnet, sepolia],
    transports: {
      // RPC URL for each chain
      [mainnet.id]: http(
        "https://eth-mainnet.g.alchemy.com/v2/demo",
      ),
      [sepolia.id]: http(
        "https://eth-sepolia.g.alchemy.com/v2/demo",
      ),
    },
    
    walletConnectProjectId: process.env.NEXT_PUBLIC_WALLETCONNECT_PROJECT_ID || '',
  })
);

export function Web3Provider({ children }) {
  return (
    <WagmiProvider config={config}>
      <QueryClientProvider client={queryClient}>
        <ConnectKitProvider>
          {children}
        </ConnectKitProvider>
      </QueryClientProvider>
    </WagmiProvider>
  );
};
"""

LEGACY_PROVIDERS_TEMPLATE = """'use client';

import { WagmiConfig, createConfig } from 'wagmi';
import { mainnet, sepolia } from 'wagmi/chains';
import { ConnectKitProvider, getDefaultConfig } from 'connectkit';

const config = createConfig(
  getDefaultConfig({
    appName: 'My Web3 App',
    appUrl: "https://example.com",
    appIcon: "https://example.com/icon.png",
    appDescription: "Ready, set, connect!",
    chains: [mainnet, sepolia],
    // RPC access for every chain goes through Alchemy
    alchemyId: "demo",
    walletConnectProjectId: process.env.NEXT_PUBLIC_WALLETCONNECT_PROJECT_ID || '',
  })
);

export function Web3Provider({ children }) {
  return (
    <WagmiConfig config={config}>
      <ConnectKitProvider>
        {children}
      </ConnectKitProvider>
    </WagmiConfig>
  );
};
"""

LAYOUT_TEMPLATE = """import './globals.css';
import { Web3Provider } from '../providers';

export const metadata = {
  title: 'Web3 App',
  description: 'Created with create-better-wagmi',
};

export default function RootLayout({ children }) {
  return (
    <html lang="en">
      <body suppressHydrationWarning={true}>
        <Web3Provider>
          {children}
        </Web3Provider>
      </body>
    </html>
  );
}
"""

PAGE_TEMPLATE = """'use client';

import { ConnectKitButton } from 'connectkit';

export default function Home() {
  return (
    <main className="flex min-h-screen flex-col items-center justify-center p-24">
      <div className="z-10 w-full max-w-5xl items-center justify-center text-center">
        <h1 className="mb-8 text-4xl font-bold">Welcome to Your Web3 App</h1>
        <div className="flex justify-center">
          <ConnectKitButton />
        </div>
      </div>
    </main>
  );
}
"""


@dataclass(frozen=True, slots=True)
class TemplateSet:
    """Files and packages that make up one :class:`TemplateFlavor`."""

    flavor: TemplateFlavor
    files: Mapping[str, str]
    packages: tuple[str, ...]
    directories: tuple[str, ...] = field(default=APP_DIRECTORIES)


_TEMPLATE_SETS: dict[TemplateFlavor, TemplateSet] = {
    TemplateFlavor.MODERN: TemplateSet(
        flavor=TemplateFlavor.MODERN,
        files=MappingProxyType(
            {
                PROVIDERS_PATH: MODERN_PROVIDERS_TEMPLATE,
                LAYOUT_PATH: LAYOUT_TEMPLATE,
                PAGE_PATH: PAGE_TEMPLATE,
            }
        ),
        packages=("@shadcn/ui", "wagmi", "viem", "connectkit", "@tanstack/react-query"),
    ),
    TemplateFlavor.LEGACY: TemplateSet(
        flavor=TemplateFlavor.LEGACY,
        files=MappingProxyType(
            {
                PROVIDERS_PATH: LEGACY_PROVIDERS_TEMPLATE,
                LAYOUT_PATH: LAYOUT_TEMPLATE,
                PAGE_PATH: PAGE_TEMPLATE,
            }
        ),
        packages=("@shadcn/ui", "wagmi@1", "viem@1", "connectkit@1"),
    ),
}


def get_template_set(flavor: TemplateFlavor | str = TemplateFlavor.MODERN) -> TemplateSet:
    """Return the :class:`TemplateSet` registered for ``flavor``."""

    return _TEMPLATE_SETS[TemplateFlavor(flavor)]
