"""Example source templates: UiShell component, HomePage route, global stylesheet.

The stylesheet defines the CSS custom properties that tailwind.config.js maps
onto colour tokens; `.dark` overrides them for dark mode.
"""
from __future__ import annotations

UI_SHELL = """\
import { Button, Card } from '@mindfiredigital/ignix-ui';

export function UiShell() {
  return (
    <section className="space-y-6 rounded-2xl border border-border bg-background/80 p-8 shadow-sm backdrop-blur">
      <header>
        <p className="text-sm uppercase tracking-widest text-muted-foreground">Ignix UI</p>
        <h1 className="text-3xl font-semibold">Framework-agnostic starter</h1>
        <p className="mt-2 text-base text-muted-foreground">
          Compose Tailwind primitives, strict TypeScript types, and Ignix UI components in any React
          runtime: Next.js, Remix, Vite, Expo Router for web, or custom design systems.
        </p>
      </header>
      <Card className="space-y-4 p-6">
        <div>
          <h2 className="text-lg font-medium">Drop-in ready</h2>
          <p className="text-sm text-muted-foreground">
            Add your preferred router and renderer, wire the exported pages, and keep this starter as
            a shared UI workspace.
          </p>
        </div>
        <Button size="lg" className="w-full sm:w-auto">
          Start shipping
        </Button>
      </Card>
    </section>
  );
}
"""

HOME_PAGE = """\
import { UiShell } from '../components/UiShell';

export function HomePage() {
  return (
    <main className="min-h-screen bg-gradient-to-b from-background via-background to-muted px-4 py-16">
      <div className="mx-auto flex w-full max-w-4xl flex-col gap-4 text-foreground">
        <UiShell />
        <section className="rounded-2xl border border-dashed border-border p-6 text-sm text-muted-foreground">
          <p className="font-medium text-foreground">Plug me anywhere</p>
          <ul className="list-inside list-disc space-y-2 pt-2">
            <li>Next.js / Remix / Expo Router: import the components into your route files</li>
            <li>Vite / Rspack / Webpack: mount `HomePage` in your entry point</li>
            <li>Design systems: re-export `UiShell` from a shared package</li>
          </ul>
        </section>
      </div>
    </main>
  );
}

export default HomePage;
"""

GLOBAL_STYLES = """\
@tailwind base;
@tailwind components;
@tailwind utilities;

:root {
  --background: 0 0% 100%;
  --foreground: 224 71% 4%;
  --primary: 222.2 47.4% 11.2%;
  --primary-foreground: 210 40% 98%;
  --secondary: 210 40% 96.1%;
  --secondary-foreground: 222.2 47.4% 11.2%;
  --muted: 210 40% 96.1%;
  --muted-foreground: 215.4 16.3% 46.9%;
  --accent: 210 40% 96.1%;
  --accent-foreground: 222.2 47.4% 11.2%;
  --border: 214.3 31.8% 91.4%;
  --input: 214.3 31.8% 91.4%;
  --ring: 222.2 84% 4.9%;
}

.dark {
  --background: 222.2 84% 4.9%;
  --foreground: 210 40% 98%;
  --primary: 210 40% 98%;
  --primary-foreground: 222.2 47.4% 11.2%;
  --secondary: 217.2 32.6% 17.5%;
  --secondary-foreground: 210 40% 98%;
  --muted: 217.2 32.6% 17.5%;
  --muted-foreground: 215 20.2% 65.1%;
  --accent: 217.2 32.6% 17.5%;
  --accent-foreground: 210 40% 98%;
  --border: 217.2 32.6% 17.5%;
  --input: 217.2 32.6% 17.5%;
  --ring: 212.7 26.8% 83.9%;
}

body {
  @apply bg-background text-foreground antialiased;
}
"""
