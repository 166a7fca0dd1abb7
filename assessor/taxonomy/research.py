"""Published study findings the matcher and report generator draw on."""

from __future__ import annotations

HIGHEST_IMPACT_OCCUPATIONS: tuple[str, ...] = (
    "Interpreters and Translators",
    "Writers and Authors",
    "Customer Service Representatives",
    "Sales Representatives",
    "Technical Writers",
)

LOWEST_IMPACT_OCCUPATIONS: tuple[str, ...] = (
    "Nursing Assistants",
    "Massage Therapists",
    "Water Treatment Plant Operators",
    "Dishwashers",
    "Roofers",
)

HIGH_AUTOMATION_ACTIVITIES: tuple[str, ...] = (
    "Processing Information",
    "Analyzing Data or Information",
    "Getting Information",
    "Documenting/Recording Information",
    "Working with Computers",
)

HIGH_AUGMENTATION_ACTIVITIES: tuple[str, ...] = (
    "Making Decisions and Solving Problems",
    "Thinking Creatively",
    "Updating and Using Relevant Knowledge",
    "Communicating with People Outside Organization",
    "Providing Consultation and Advice",
)

RESEARCH_CITATIONS: tuple[str, ...] = (
    'Tomlinson, K., et al. (2024). "Working with AI: Measuring the Occupational Implications of Generative AI." '
    "Microsoft Research. Analysis of 200,000 AI conversations.",
    'Goldman Sachs (2023). "The Potentially Large Effects of Artificial Intelligence on Economic Growth." '
    "300M jobs affected globally, $7T economic impact.",
    'PwC (2025). "AI Jobs Barometer." 33% wage premium for AI-skilled workers, 85% adoption rate projection.',
    'McKinsey Global Institute (2025). "The Future of Work in America." '
    "13% workforce transition by 2030, 97M new jobs created.",
    'Frey, C.B. & Osborne, M. (2017). "The Future of Employment." Oxford Martin School. '
    "Automation probability analysis.",
    "O*NET 29.3 Database (2024). U.S. Department of Labor. Comprehensive occupational data.",
    'World Economic Forum (2025). "Future of Jobs Report." 97 million new AI-related jobs by 2025.',
)
