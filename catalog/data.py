"""Static content rendered by the landing page."""

from catalog.models import LibraryPrompt, ModelInfo, NavLink, PricingTier

MODELS: list[ModelInfo] = [
    ModelInfo(
        id="gpt-4o",
        name="GPT‑4o",
        family="OpenAI",
        params="?",
        license="Proprietary",
        released="2024",
        speed=4,
        cost=4,
        strength=["Reasoning", "Tool Use", "Multimodal"],
    ),
    ModelInfo(
        id="gpt-4.1-mini",
        name="GPT‑4.1 mini",
        family="OpenAI",
        params="?",
        license="Proprietary",
        released="2024",
        speed=5,
        cost=2,
        strength=["Cheap", "Fast", "General"],
    ),
    ModelInfo(
        id="llama-3.1-70b",
        name="Llama 3.1 70B",
        family="Meta",
        params="70B",
        license="Open (LLAMA)",
        released="2024",
        speed=3,
        cost=3,
        strength=["Open Source", "Strong Coding"],
    ),
    ModelInfo(
        id="mistral-large",
        name="Mistral Large",
        family="Mistral",
        params="?",
        license="Proprietary",
        released="2024",
        speed=3,
        cost=3,
        strength=["Concise", "Efficient"],
    ),
]

PROMPTS: list[LibraryPrompt] = [
    LibraryPrompt(
        id=1,
        title="Blog Outliner",
        body=(
            "Act as a content strategist. Outline a 1,200‑word blog on "
            "‘LLM Safety by Design’. Include H2/H3s and 5 key references."
        ),
        tags=["marketing", "writing"],
    ),
    LibraryPrompt(
        id=2,
        title="Code Reviewer",
        body=(
            "You are a senior TypeScript reviewer. Given code and tests, "
            "return a concise diff‑style review with risks and fixes."
        ),
        tags=["engineering", "code"],
    ),
    LibraryPrompt(
        id=3,
        title="UX Feedback Bot",
        body=(
            "Role‑play a critical UX researcher. Evaluate a landing page hero "
            "for clarity, proof, and actionability. Return a 10‑point checklist."
        ),
        tags=["design", "ux"],
    ),
]

PRICING: list[PricingTier] = [
    PricingTier(
        name="Starter",
        price="Free",
        desc="Prompt Library, Demo Playground, 50 local runs/day",
        cta="Get Started",
    ),
    PricingTier(
        name="Builder",
        price="$19/mo",
        desc="Custom prompt collections, export, API connector",
        cta="Upgrade",
    ),
    PricingTier(
        name="Team",
        price="$79/mo",
        desc="Shared libraries, roles, usage analytics",
        cta="Contact Sales",
    ),
]

NAV_LINKS: list[NavLink] = [
    NavLink(label="Models", href="#models"),
    NavLink(label="Compare", href="#compare"),
    NavLink(label="Playground", href="#playground"),
    NavLink(label="Prompts", href="#prompts"),
    NavLink(label="Pricing", href="#pricing"),
]

FOOTER_LINKS: list[NavLink] = [
    NavLink(label="Models", href="#models"),
    NavLink(label="Compare", href="#compare"),
    NavLink(label="Prompts", href="#prompts"),
    NavLink(label="Pricing", href="#pricing"),
    NavLink(label="Docs", href="#docs"),
]

HERO_LINKS: list[NavLink] = [
    NavLink(label="Try Playground", href="#playground"),
    NavLink(label="Browse Models", href="#models"),
    NavLink(label="Prompt Library", href="#prompts"),
]

DEFAULT_PLAYGROUND_PROMPT = (
    "Act as a product marketer. Write a 50‑word hero subtitle for an LLM "
    "playground website in a confident, simple tone."
)

# Placeholder until a real API is connected
CANNED_RESPONSE = (
    "Build, test, and compare AI models in minutes—not months. Run playful "
    "demos, refine prompts, and ship production‑ready workflows with clarity "
    "and control."
)

DEFAULT_COMPARE_A = MODELS[0].id
DEFAULT_COMPARE_B = MODELS[2].id
