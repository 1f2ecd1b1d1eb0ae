"""Tooling configuration templates: TypeScript, Tailwind, PostCSS, ESLint, Ignix."""
from __future__ import annotations

from typing import Any

REGISTRY_URL = (
    "https://raw.githubusercontent.com/mindfiredigital/ignix-ui/main/packages/registry/registry.json"
)
THEMES_URL = (
    "https://raw.githubusercontent.com/mindfiredigital/ignix-ui/main/packages/registry/themes.json"
)

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "lib": ["DOM", "DOM.Iterable", "ES2020"],
        "module": "ESNext",
        "moduleResolution": "Bundler",
        "strict": True,
        "noEmit": True,
        "skipLibCheck": False,
        "forceConsistentCasingInFileNames": True,
        "esModuleInterop": True,
        "resolveJsonModule": True,
        "jsx": "react-jsx",
        "baseUrl": ".",
        "paths": {
            "@/*": ["src/*"],
        },
    },
    "include": ["src"],
    "exclude": ["node_modules", "dist"],
}

ESLINT_CONFIG: dict[str, Any] = {
    "env": {
        "browser": True,
        "es2022": True,
    },
    "parser": "@typescript-eslint/parser",
    "parserOptions": {
        "ecmaVersion": "latest",
        "sourceType": "module",
        "ecmaFeatures": {
            "jsx": True,
        },
    },
    "plugins": ["@typescript-eslint"],
    "extends": ["eslint:recommended", "plugin:@typescript-eslint/recommended"],
    "ignorePatterns": ["dist", "node_modules"],
    "rules": {
        "@typescript-eslint/no-unused-vars": [
            "warn",
            {"argsIgnorePattern": "^_", "varsIgnorePattern": "^_"},
        ],
    },
}

TAILWIND_CONFIG = """\
/** @type {import('tailwindcss').Config} */
module.exports = {
  darkMode: ['class', '[data-theme="dark"]'],
  content: [
    './src/components/**/*.{ts,tsx,js,jsx}',
    './src/pages/**/*.{ts,tsx,js,jsx}',
    './node_modules/@mindfiredigital/ignix-ui/**/*.{js,ts,jsx,tsx}',
  ],
  theme: {
    extend: {
      colors: {
        background: 'var(--background)',
        foreground: 'var(--foreground)',
        primary: {
          DEFAULT: 'var(--primary)',
          foreground: 'var(--primary-foreground)',
        },
        secondary: {
          DEFAULT: 'var(--secondary)',
          foreground: 'var(--secondary-foreground)',
        },
        muted: {
          DEFAULT: 'var(--muted)',
          foreground: 'var(--muted-foreground)',
        },
        accent: {
          DEFAULT: 'var(--accent)',
          foreground: 'var(--accent-foreground)',
        },
        border: 'var(--border)',
        input: 'var(--input)',
        ring: 'var(--ring)',
      },
    },
  },
  plugins: [],
};
"""

POSTCSS_CONFIG = """\
module.exports = {
  plugins: {
    tailwindcss: {},
    autoprefixer: {},
  },
};
"""

IGNIX_CONFIG = f"""\
/* eslint-env node */
/** @type {{import('@mindfiredigital/ignix-cli').IgnixConfig}} */
module.exports = {{
  registryUrl:
    '{REGISTRY_URL}',
  themeUrl:
    '{THEMES_URL}',
  componentsDir: 'src/components',
  themesDir: 'src/styles/themes',
}};
"""
