"""Repository-level templates: .gitignore and README.md."""
from __future__ import annotations

GITIGNORE = """\
node_modules
dist
.turbo
.next
.vercel
.cache
.env
.env.*
*.log
*.lock
.DS_Store
"""

README = """\
# Ignix UI Universal Starter

A framework-agnostic React + TypeScript + Tailwind starter wired for Ignix UI. Drop these folders into any framework (Next.js, Remix, Gatsby, Vite, Expo Router for web) or keep them in a standalone UI workspace.

## What's inside

- ✅ Strict TypeScript configuration with sensible aliases
- ✅ Tailwind CSS v3+ with design tokens that mirror Ignix UI defaults
- ✅ Ready-to-import Ignix UI component examples (`UiShell`, `HomePage`)
- ✅ Opinionated folder structure:
  - `src/components` for reusable UI
  - `src/pages` for route-level views
  - `src/styles` for global and theme styles
- ✅ Build hints for CSS + type-check pipelines

## Scripts

- `npm run dev` – attach your framework runner (defaults to a placeholder echo)
- `npm run typecheck` – zero-emission strict TypeScript check
- `npm run build:css` – compiles Tailwind to `dist/styles.css`
- `npm run build` – runs both to keep CI happy
- `npm run lint` / `npm run format` – optional quality gates

## Hook it into your framework

1. Copy `src/components`, `src/pages`, and `src/styles` into your app (or keep this repo dedicated to UI).
2. Ensure your bundler resolves `@/*` to `src/*` (Next.js, Remix, Vite already do).
3. Import `HomePage` from `src/pages/index.tsx` wherever your framework expects a view component.
4. Keep Tailwind running:

   ```bash
   npm install
   npm run build:css # or tailwindcss -w for watch mode
   ```

## Ignix CLI integration

- Add more components: `npx ignix add <component-name>`
- Browse starters: `npx ignix starters`
- Manage themes: `npx ignix themes list`

## Next steps

1. Initialize git: `git init && git add . && git commit -m "init ignix universal starter"`
2. Wire the exported components into your chosen framework.
3. Deploy with the tooling you already use (Vercel, Netlify, Render, Docker, etc.).

Happy shipping! 🚀
"""
