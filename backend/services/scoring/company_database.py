"""Static company difficulty table.

Loaded once at import and exposed read-only; resolvers receive these
mappings by reference and never mutate them.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from models.schemas.company_difficulty import CompanyTier, CompetitionLevel


@dataclass(frozen=True)
class CompanyEntry:
    tier: CompanyTier
    difficulty_multiplier: float
    intern_multiplier: float
    acceptance_rate_estimate: str
    competition_level: CompetitionLevel
    interview_bar_description: str
    aliases: tuple[str, ...] = ()


@dataclass(frozen=True)
class TierMeta:
    acceptance_rate: str
    competition_level: CompetitionLevel
    bar_description: str


_COMPANIES: dict[str, CompanyEntry] = {
    # FAANG_PLUS
    "google": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.45,
        intern_multiplier=1.25,
        acceptance_rate_estimate="1-2%",
        competition_level="extreme",
        interview_bar_description=(
            "Expects strong algorithmic thinking, system design depth, and Googleyness (leadership, collaboration). Multiple rounds with high reject rates at each stage."
        ),
    ),
    "meta": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.4,
        intern_multiplier=1.25,
        acceptance_rate_estimate="1-3%",
        competition_level="extreme",
        interview_bar_description=(
            "Emphasizes move-fast culture, coding speed, and system design. Behavioral rounds focus on impact at scale."
        ),
        aliases=("facebook",),
    ),
    "apple": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.4,
        intern_multiplier=1.2,
        acceptance_rate_estimate="2-4%",
        competition_level="extreme",
        interview_bar_description=(
            "Highly secretive process. Deep domain expertise required. Emphasis on craft, attention to detail, and cross-functional collaboration."
        ),
    ),
    "amazon": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.4,
        intern_multiplier=1.2,
        acceptance_rate_estimate="2-3%",
        competition_level="extreme",
        interview_bar_description=(
            "Leadership Principles dominate every round. Expect deep behavioral + technical bars. Bar raiser process adds extra scrutiny."
        ),
    ),
    "netflix": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.35,
        intern_multiplier=1.15,
        acceptance_rate_estimate="2-5%",
        competition_level="extreme",
        interview_bar_description=(
            "Culture of freedom and responsibility. Very senior-oriented hiring. Expects strong ownership, judgment, and domain mastery."
        ),
    ),
    "microsoft": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.35,
        intern_multiplier=1.2,
        acceptance_rate_estimate="2-4%",
        competition_level="extreme",
        interview_bar_description=(
            "Structured loop interviews with growth mindset evaluation. Strong emphasis on coding, system design, and collaboration."
        ),
    ),
    "nvidia": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.45,
        intern_multiplier=1.25,
        acceptance_rate_estimate="1-3%",
        competition_level="extreme",
        interview_bar_description=(
            "Deeply technical interviews focused on GPU architecture, CUDA, and systems programming. Hardware-software co-design knowledge is a major differentiator."
        ),
    ),
    "openai": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.5,
        intern_multiplier=1.3,
        acceptance_rate_estimate="<1%",
        competition_level="extreme",
        interview_bar_description=(
            "Extremely competitive. Expects world-class ML/AI fundamentals, strong coding, and mission alignment. Research-oriented candidates need publications or equivalent impact."
        ),
    ),
    "anthropic": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.5,
        intern_multiplier=1.3,
        acceptance_rate_estimate="<1%",
        competition_level="extreme",
        interview_bar_description=(
            "Focuses on AI safety alignment, strong technical fundamentals, and research depth. Extremely selective with emphasis on thoughtful reasoning."
        ),
    ),
    "jane street": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.5,
        intern_multiplier=1.3,
        acceptance_rate_estimate="<1%",
        competition_level="extreme",
        interview_bar_description=(
            "Probability, mental math, and functional programming (OCaml). Multiple technical rounds with brain teasers and market-making simulations."
        ),
    ),
    "citadel": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.45,
        intern_multiplier=1.25,
        acceptance_rate_estimate="1-2%",
        competition_level="extreme",
        interview_bar_description=(
            "Quant-heavy interviews with probability, statistics, and algorithmic challenges. Expects exceptional problem-solving speed and mathematical maturity."
        ),
        aliases=("citadel securities",),
    ),
    "two sigma": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.45,
        intern_multiplier=1.25,
        acceptance_rate_estimate="1-2%",
        competition_level="extreme",
        interview_bar_description=(
            "Data-driven culture. Interviews test statistical reasoning, ML, and systems thinking. Strong emphasis on intellectual curiosity."
        ),
    ),
    "de shaw": CompanyEntry(
        tier="FAANG_PLUS",
        difficulty_multiplier=1.45,
        intern_multiplier=1.25,
        acceptance_rate_estimate="1-3%",
        competition_level="extreme",
        interview_bar_description=(
            "Quant and tech roles test algorithmic depth, probability theory, and system design. Known for rigorous multi-round processes."
        ),
        aliases=("d.e. shaw", "d. e. shaw"),
    ),

    # BIG_TECH
    "uber": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.25,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "System design focus on distributed systems and real-time data. Strong coding bar with emphasis on scalability."
        ),
    ),
    "airbnb": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.25,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "Cross-functional interviews with strong culture-fit component. Values-driven hiring with emphasis on belonging and craft."
        ),
    ),
    "salesforce": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="5-8%",
        competition_level="very_high",
        interview_bar_description=(
            "Cloud platform expertise valued. Mix of technical and behavioral rounds with emphasis on customer success mindset."
        ),
    ),
    "shopify": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="very_high",
        interview_bar_description=(
            "Life story interview + technical deep dive. Values entrepreneurial mindset and builder mentality."
        ),
    ),
    "spotify": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="very_high",
        interview_bar_description=(
            "Autonomous squad culture. Interviews test technical skills plus collaboration and data-driven decision making."
        ),
    ),
    "stripe": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.3,
        intern_multiplier=1.2,
        acceptance_rate_estimate="2-4%",
        competition_level="very_high",
        interview_bar_description=(
            "Extremely high coding bar. Bug squash and system design rounds. Looks for exceptional attention to detail and developer empathy."
        ),
    ),
    "linkedin": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.25,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "Standard big tech loop with coding, system design, and behavioral. Values transformation and results-oriented culture."
        ),
    ),
    "twitter": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="very_high",
        interview_bar_description=(
            "Real-time systems focus. Emphasis on distributed systems, data pipelines, and scaling."
        ),
        aliases=("x", "x corp"),
    ),
    "snap": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="very_high",
        interview_bar_description=(
            "Mobile and AR/VR focus. Technical interviews test mobile development, camera systems, and real-time processing."
        ),
        aliases=("snapchat",),
    ),
    "tiktok": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.25,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "Fast-paced culture with strong algorithmic focus. Emphasis on recommendation systems and large-scale data processing."
        ),
        aliases=("bytedance",),
    ),
    "oracle": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="5-8%",
        competition_level="very_high",
        interview_bar_description=(
            "Database and cloud infrastructure focus. Multiple technical rounds with system design emphasis."
        ),
    ),
    "adobe": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="5-8%",
        competition_level="very_high",
        interview_bar_description=(
            "Creative technology focus. Interviews emphasize software architecture, user experience thinking, and technical depth."
        ),
    ),
    "palantir": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.3,
        intern_multiplier=1.2,
        acceptance_rate_estimate="2-4%",
        competition_level="very_high",
        interview_bar_description=(
            "Decomposition and forward-deployed engineering focus. Tests problem decomposition, system design, and mission-driven thinking."
        ),
    ),
    "databricks": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.3,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "Data engineering and Spark expertise valued. Strong emphasis on distributed systems and data platform architecture."
        ),
    ),
    "snowflake": CompanyEntry(
        tier="BIG_TECH",
        difficulty_multiplier=1.25,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-6%",
        competition_level="very_high",
        interview_bar_description=(
            "Cloud data platform focus. System design and database internals knowledge tested thoroughly."
        ),
    ),

    # TOP_FINANCE
    "goldman sachs": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.35,
        intern_multiplier=1.2,
        acceptance_rate_estimate="2-4%",
        competition_level="very_high",
        interview_bar_description=(
            "Superday format with multiple rounds. Tests financial knowledge, problem-solving, and cultural fit. Engineering roles test system design and coding."
        ),
    ),
    "jp morgan": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.3,
        intern_multiplier=1.2,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "Structured process with HireVue and superday. Tests financial acumen, technical skills, and leadership potential."
        ),
        aliases=("jpmorgan", "jpmorgan chase", "j.p. morgan"),
    ),
    "morgan stanley": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.3,
        intern_multiplier=1.2,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "Technology division has strong coding bars. Finance roles test market knowledge and analytical thinking."
        ),
    ),
    "blackstone": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.4,
        intern_multiplier=1.25,
        acceptance_rate_estimate="1-3%",
        competition_level="extreme",
        interview_bar_description=(
            "PE/investment focus with extreme selectivity. Tests financial modeling, deal analysis, and leadership under pressure."
        ),
    ),
    "blackrock": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.3,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "Asset management focus. Tests quantitative skills, market understanding, and Aladdin platform knowledge for tech roles."
        ),
    ),
    "bloomberg": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.3,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-5%",
        competition_level="very_high",
        interview_bar_description=(
            "Terminal-centric culture. Strong C++ coding bar for engineering. Tests data structure knowledge and financial data processing."
        ),
    ),
    "bank of america": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.25,
        intern_multiplier=1.15,
        acceptance_rate_estimate="4-6%",
        competition_level="very_high",
        interview_bar_description=(
            "Structured interview process with behavioral and technical rounds. Values teamwork and client-focused mindset."
        ),
        aliases=("bofa",),
    ),
    "barclays": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.25,
        intern_multiplier=1.15,
        acceptance_rate_estimate="4-6%",
        competition_level="very_high",
        interview_bar_description=(
            "Investment banking and technology roles with structured assessment centers. Strength in global markets."
        ),
    ),
    "kkr": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.4,
        intern_multiplier=1.25,
        acceptance_rate_estimate="1-3%",
        competition_level="extreme",
        interview_bar_description=(
            "Private equity focus with case studies and LBO modeling. Extremely competitive with emphasis on deal judgment."
        ),
    ),
    "point72": CompanyEntry(
        tier="TOP_FINANCE",
        difficulty_multiplier=1.35,
        intern_multiplier=1.2,
        acceptance_rate_estimate="2-4%",
        competition_level="very_high",
        interview_bar_description=(
            "Hedge fund with quantitative focus. Tests statistical reasoning, market intuition, and analytical rigor."
        ),
    ),

    # UNICORN
    "figma": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.25,
        intern_multiplier=1.1,
        acceptance_rate_estimate="3-6%",
        competition_level="high",
        interview_bar_description=(
            "Design-engineering culture. Tests product thinking, frontend expertise, and collaboration with designers."
        ),
    ),
    "notion": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Small team, high bar. Values product sense, clean code, and ability to work across the stack."
        ),
    ),
    "vercel": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.05,
        acceptance_rate_estimate="5-8%",
        competition_level="high",
        interview_bar_description=(
            "Developer tooling focus. Tests understanding of web performance, edge computing, and frontend architecture."
        ),
    ),
    "scale ai": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.25,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-6%",
        competition_level="high",
        interview_bar_description=(
            "AI/ML data infrastructure focus. Tests system design for data pipelines and ML engineering fundamentals."
        ),
        aliases=("scale",),
    ),
    "discord": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Real-time communication systems. Tests distributed systems, WebSocket architecture, and scaling challenges."
        ),
    ),
    "coinbase": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Crypto/blockchain focus. Tests security mindset, distributed systems, and financial engineering."
        ),
    ),
    "instacart": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.15,
        intern_multiplier=1.05,
        acceptance_rate_estimate="5-8%",
        competition_level="high",
        interview_bar_description=(
            "Marketplace and logistics optimization. Tests algorithm design, system design, and product thinking."
        ),
    ),
    "doordash": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Logistics and marketplace focus. Tests optimization algorithms, system design, and real-time data processing."
        ),
    ),
    "plaid": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Fintech infrastructure focus. Tests API design, security, and financial data systems."
        ),
    ),
    "ramp": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Fast-growing fintech. Tests full-stack ability, product thinking, and speed of execution."
        ),
    ),
    "rippling": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "HR/IT platform with high engineering bar. Tests system design, coding speed, and product-minded engineering."
        ),
    ),
    "anduril": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.25,
        intern_multiplier=1.15,
        acceptance_rate_estimate="3-6%",
        competition_level="high",
        interview_bar_description=(
            "Defense tech with systems engineering focus. Tests real-time systems, C++/Rust, and hardware-software integration."
        ),
    ),
    "datadog": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Observability platform. Tests distributed systems, data pipeline design, and performance engineering."
        ),
    ),
    "cloudflare": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Edge computing and networking. Tests systems programming, networking fundamentals, and performance optimization."
        ),
    ),
    "robinhood": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.2,
        intern_multiplier=1.1,
        acceptance_rate_estimate="4-7%",
        competition_level="high",
        interview_bar_description=(
            "Fintech with emphasis on reliability and security. Tests system design for financial systems and real-time trading."
        ),
    ),
    "mongodb": CompanyEntry(
        tier="UNICORN",
        difficulty_multiplier=1.15,
        intern_multiplier=1.05,
        acceptance_rate_estimate="5-8%",
        competition_level="high",
        interview_bar_description=(
            "Database internals and distributed systems focus. Tests storage engine knowledge and data modeling."
        ),
    ),

    # GROWTH
    # Growth-tier companies are typically inferred from JD signals,
    # but a few well-known ones are listed for direct matching.
    "linear": CompanyEntry(
        tier="GROWTH",
        difficulty_multiplier=1.1,
        intern_multiplier=1.05,
        acceptance_rate_estimate="8-12%",
        competition_level="moderate",
        interview_bar_description=(
            "Small team with high craft standards. Tests product sense and engineering taste."
        ),
    ),
    "supabase": CompanyEntry(
        tier="GROWTH",
        difficulty_multiplier=1.1,
        intern_multiplier=1.05,
        acceptance_rate_estimate="8-12%",
        competition_level="moderate",
        interview_bar_description=(
            "Open source database platform. Tests PostgreSQL knowledge, API design, and developer tooling."
        ),
    ),
    "retool": CompanyEntry(
        tier="GROWTH",
        difficulty_multiplier=1.1,
        intern_multiplier=1.05,
        acceptance_rate_estimate="8-12%",
        competition_level="moderate",
        interview_bar_description=(
            "Internal tools platform. Tests full-stack engineering and product-minded development."
        ),
    ),
    "cursor": CompanyEntry(
        tier="GROWTH",
        difficulty_multiplier=1.15,
        intern_multiplier=1.05,
        acceptance_rate_estimate="5-10%",
        competition_level="high",
        interview_bar_description=(
            "AI-powered developer tools. Tests ML engineering, editor architecture, and developer experience design."
        ),
    ),
}

COMPANY_DATABASE: Mapping[str, CompanyEntry] = MappingProxyType(_COMPANIES)

ALIAS_MAP: Mapping[str, str] = MappingProxyType({
    alias: canonical
    for canonical, entry in _COMPANIES.items()
    for alias in entry.aliases
})

# Used when the tier is inferred from JD signals rather than a named company
TIER_META: Mapping[str, TierMeta] = MappingProxyType({
    "FAANG_PLUS": TierMeta(
        acceptance_rate="1-3%",
        competition_level="extreme",
        bar_description=(
            "Top-tier company with extremely competitive interview process. Expect multiple technical and behavioral rounds with high rejection rates."
        ),
    ),
    "BIG_TECH": TierMeta(
        acceptance_rate="3-7%",
        competition_level="very_high",
        bar_description=(
            "Major tech company with rigorous interview loop. Expect coding, system design, and behavioral rounds."
        ),
    ),
    "TOP_FINANCE": TierMeta(
        acceptance_rate="2-5%",
        competition_level="very_high",
        bar_description=(
            "Top financial institution with demanding interview process. Expect technical rounds plus domain-specific assessment."
        ),
    ),
    "UNICORN": TierMeta(
        acceptance_rate="4-8%",
        competition_level="high",
        bar_description=(
            "High-growth company with selective hiring. Expect focus on product thinking and technical depth."
        ),
    ),
    "GROWTH": TierMeta(
        acceptance_rate="8-15%",
        competition_level="moderate",
        bar_description=(
            "Growth-stage company with standard technical interview process. Values adaptability and shipping speed."
        ),
    ),
    "STANDARD": TierMeta(
        acceptance_rate="10-20%",
        competition_level="moderate",
        bar_description=(
            "Standard interview process. Focus on demonstrating core competencies and cultural fit."
        ),
    ),
})

DIFFERENTIATION_STRATEGIES: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "FAANG_PLUS": (
        "Demonstrate system design thinking at scale — discuss trade-offs with specific numbers (QPS, latency, storage)",
        "Lead with metrics: quantify every achievement with business impact (revenue, users, performance gains)",
        "Show depth in one area rather than breadth — FAANG interviewers value T-shaped expertise",
        "Prepare company-specific behavioral stories using their leadership principles or core values",
        "Practice explaining complex technical concepts simply — communication is a hidden bar",
        "Build or contribute to open-source projects that demonstrate algorithmic sophistication",
        "Research recent company blog posts and reference their specific technical challenges in your answers",
        "Prepare 2-3 stories showing ownership of end-to-end projects from design to production",
    ),
    "BIG_TECH": (
        "Highlight cross-functional collaboration stories that show product thinking",
        "Demonstrate understanding of their specific tech stack and architecture patterns",
        "Show metrics-driven decision making with A/B testing and data-informed approaches",
        "Prepare examples of technical trade-offs you made and their business impact",
        "Research the company engineering blog and reference specific technical decisions",
        "Demonstrate ability to work autonomously while aligning with team goals",
    ),
    "TOP_FINANCE": (
        "Combine technical depth with financial domain knowledge — show you understand the business",
        "Demonstrate experience with low-latency systems, real-time data, or high-throughput processing",
        "Prepare for probability and statistics questions even for engineering roles",
        "Show attention to detail and precision — errors in finance have outsized consequences",
        "Highlight any experience with regulatory compliance, data security, or audit trails",
        "Prepare examples of working under pressure with strict deadlines",
    ),
    "UNICORN": (
        "Show scrappiness and ability to ship fast with quality — unicorns value speed",
        "Demonstrate full-stack thinking even if applying for a specialized role",
        "Highlight experience building 0-to-1 products or features with ambiguous requirements",
        "Show product sense — explain how technical decisions impact user experience",
        "Prepare examples of wearing multiple hats and adapting to changing priorities",
        "Demonstrate passion for the company mission and product with specific usage examples",
    ),
    "GROWTH": (
        "Emphasize adaptability and willingness to work across the stack",
        "Show examples of building with limited resources and making pragmatic trade-offs",
        "Demonstrate initiative and ability to identify and solve problems autonomously",
        "Highlight experience with rapid iteration and shipping incrementally",
    ),
    "STANDARD": (),
})
