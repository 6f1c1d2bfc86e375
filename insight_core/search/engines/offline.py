# © Copyright IBM Corporation 2025
# SPDX-License-Identifier: Apache-2.0


from urllib.parse import quote

from insight_core.search.engines.engine import SearchEngine
from insight_core.search.types import Source, rank_score

Topic = tuple[str, str]

TOPIC_BUNDLES: list[tuple[tuple[str, ...], list[Topic]]] = [
    (
        ("ai", "artificial intelligence", "machine learning"),
        [
            (
                "Artificial Intelligence Overview",
                "Comprehensive guide to AI technologies, applications, and future prospects in various industries.",
            ),
            (
                "Machine Learning Fundamentals",
                "Core concepts of ML algorithms, neural networks, and their practical implementations.",
            ),
            (
                "Deep Learning Applications",
                "Advanced AI techniques using deep neural networks for complex problem solving.",
            ),
            ("AI Ethics and Safety", "Important considerations for responsible AI development and deployment."),
            ("Natural Language Processing", "AI techniques for understanding and generating human language."),
            (
                "Computer Vision Technology",
                "AI systems that can interpret and analyze visual information from images and videos.",
            ),
        ],
    ),
    (
        ("quantum", "physics", "science"),
        [
            (
                "Quantum Computing Advances",
                "Latest breakthroughs in quantum computing technology and their implications for the future.",
            ),
            (
                "Quantum Physics Principles",
                "Fundamental concepts of quantum mechanics and their real-world applications in technology.",
            ),
            (
                "Scientific Research Methods",
                "Modern approaches to scientific inquiry, experimental design, and peer review processes.",
            ),
            (
                "Technology Innovation Trends",
                "Emerging technologies shaping the future of science and industry development.",
            ),
            (
                "Space Exploration Updates",
                "Recent discoveries and missions in space exploration and astronomical research.",
            ),
            (
                "Climate Science Research",
                "Current understanding of climate change, environmental science, and sustainability solutions.",
            ),
        ],
    ),
    (
        ("health", "medicine", "medical"),
        [
            (
                "Modern Healthcare Innovations",
                "Cutting-edge medical technologies, treatments, and healthcare delivery systems.",
            ),
            (
                "Preventive Medicine Strategies",
                "Evidence-based approaches to disease prevention, health screening, and wellness programs.",
            ),
            (
                "Mental Health Awareness",
                "Understanding mental health conditions, treatment options, and support resources available.",
            ),
            (
                "Nutrition and Wellness",
                "Scientific insights into optimal nutrition, exercise, and lifestyle choices for health.",
            ),
            (
                "Medical Research Breakthroughs",
                "Recent advances in medical research, drug development, and treatment methodologies.",
            ),
            (
                "Public Health Initiatives",
                "Community health programs, disease prevention strategies, and healthcare policy developments.",
            ),
        ],
    ),
    (
        ("technology", "tech", "software", "programming"),
        [
            (
                "Software Development Trends",
                "Latest programming languages, frameworks, and development methodologies in the tech industry.",
            ),
            (
                "Cybersecurity Best Practices",
                "Essential security measures, threat prevention, and data protection strategies for organizations.",
            ),
            (
                "Cloud Computing Solutions",
                "Modern cloud platforms, services, and infrastructure for scalable business applications.",
            ),
            (
                "Mobile Technology Evolution",
                "Advances in mobile devices, applications, and wireless communication technologies.",
            ),
            (
                "Internet of Things (IoT)",
                "Connected devices, smart systems, and the integration of physical and digital worlds.",
            ),
            (
                "Blockchain and Cryptocurrency",
                "Distributed ledger technology, digital currencies, and their applications beyond finance.",
            ),
        ],
    ),
    (
        ("business", "economy", "finance", "market"),
        [
            (
                "Global Economic Trends",
                "Current economic indicators, market analysis, and international trade developments.",
            ),
            (
                "Digital Transformation",
                "How businesses are adapting to digital technologies and changing consumer behaviors.",
            ),
            (
                "Sustainable Business Practices",
                "Corporate responsibility, environmental sustainability, and ethical business operations.",
            ),
            (
                "Financial Technology (FinTech)",
                "Innovation in financial services, digital payments, and investment technologies.",
            ),
            (
                "Entrepreneurship and Startups",
                "Business creation, venture capital, and innovation in emerging markets and industries.",
            ),
            (
                "Supply Chain Management",
                "Modern logistics, inventory management, and global supply chain optimization strategies.",
            ),
        ],
    ),
]


def generic_topics(query: str) -> list[Topic]:
    return [
        (
            f"Understanding {query}",
            f"Comprehensive overview of {query} and its key aspects, applications, and significance in today's world.",
        ),
        (
            f"{query} Research and Development",
            f"Latest research findings, academic studies, and developments in the field of {query}.",
        ),
        (
            f"{query} Applications and Uses",
            f"Practical applications and real-world uses of {query} across different sectors and industries.",
        ),
        (
            f"Future of {query}",
            f"Emerging trends, future prospects, and potential developments related to {query} and its evolution.",
        ),
        (
            f"{query} Best Practices",
            f"Recommended approaches, methodologies, and standards for working with or understanding {query}.",
        ),
        (
            f"{query} Case Studies",
            f"Real-world examples, success stories, and lessons learned from implementations of {query}.",
        ),
    ]


def related_topics(query: str) -> list[Topic]:
    """First bundle whose keywords occur anywhere in the lower-cased query, else the generic bundle."""
    query_lower = query.lower()
    for keywords, topics in TOPIC_BUNDLES:
        if any(keyword in query_lower for keyword in keywords):
            return topics
    return generic_topics(query)


def wikipedia_url(title: str) -> str:
    return "https://en.wikipedia.org/wiki/" + quote("_".join(title.split()), safe="()'!*~")


class OfflineSearch(SearchEngine):
    """
    Deterministic last-resort engine, never touches the network and never fails
    """

    score_step = 0.15

    async def search(self, query: str, max_results: int = 10) -> list[Source]:
        # always the full bundle, max_results does not apply
        return [
            Source(
                id=f"fallback-{index}",
                title=title,
                url=wikipedia_url(title),
                snippet=description,
                relevance_score=rank_score(index, self.score_step),
            )
            for index, (title, description) in enumerate(related_topics(query))
        ]
