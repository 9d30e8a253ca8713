"""Home, info, overview, tools and docs pages."""

from src.content.categories import CATEGORIES
from src.core.pages import CategoryOption, ExternalLink, InfoPage, InfoSection

HOME = InfoPage(
    path="/",
    title="Classification of Cryptographic Vulnerabilities",
    sections=(
        InfoSection(
            heading="About",
            paragraphs=(
                "This catalogue explores cryptographic weaknesses through the lens of "
                "the Common Weakness Enumeration and pairs each one with practical "
                "Python examples of insecure and secure code.",
                "Content is organised into categories, each addressing a class of "
                "cryptographic vulnerabilities and the mitigations that address it.",
            ),
        ),
    ),
    links=(
        CategoryOption("Examples", "/cwe-examples", "left"),
        CategoryOption("Info", "/info", "center"),
        CategoryOption("Tools", "/tools", "center"),
        CategoryOption("Docs", "/docs", "right"),
    ),
)

INFO = InfoPage(
    path="/info",
    title="Deep Dive: The CIA Triad",
    sections=(
        InfoSection(
            heading="Confidentiality",
            paragraphs=(
                "Confidentiality ensures that sensitive information is only "
                "accessible to those authorised to read it.",
            ),
            bullets=(
                "Implemented via encryption (AES, ChaCha20, RSA).",
                "Risks: weak ciphers such as DES, exposed keys, missing TLS.",
                "Use strong algorithms and secure key storage (HSMs, vaults).",
            ),
        ),
        InfoSection(
            heading="Integrity",
            paragraphs=(
                "Integrity ensures that data is not altered during storage or "
                "transmission, accidentally or maliciously.",
            ),
            bullets=(
                "Enforced via hashes (SHA-256), MACs and digital signatures.",
                "Avoid weak hashes like MD5 or SHA-1.",
                "Use authenticated encryption modes like AES-GCM.",
            ),
        ),
        InfoSection(
            heading="Authenticity",
            paragraphs=(
                "Authenticity guarantees that a peer is who it claims to be and that "
                "data comes from a verified source.",
            ),
            bullets=(
                "Implemented via digital signatures and certificates (PKI).",
                "Validate certificates; avoid self-signed certificates in production.",
                "Protect against spoofing and weak identity validation.",
            ),
        ),
        InfoSection(
            heading="What Are CWEs?",
            paragraphs=(
                "CWE stands for Common Weakness Enumeration, a community-developed "
                "list of software and hardware weakness types maintained by MITRE. "
                "Each entry is a generalised pattern that often leads to "
                "vulnerabilities, not a specific bug.",
                "This catalogue focuses on CWEs related to cryptography: misuse of "
                "libraries, broken algorithms, key management flaws and randomness "
                "issues.",
            ),
        ),
    ),
)

CATEGORY_OVERVIEW = InfoPage(
    path="/cwe-examples",
    title="Cryptographic CWE Categories",
    sections=(
        InfoSection(
            heading="Categorisation",
            paragraphs=(
                "Cryptography-related CWEs are grouped into categories, each split "
                "into more specific subcategories, to highlight the different "
                "aspects of cryptographic flaws.",
            ),
        ),
    ),
    links=tuple(CategoryOption(category.title, category.path) for category in CATEGORIES),
)


# Placeholder entries without a published URL are left out.
TOOLS = InfoPage(
    path="/tools",
    title="Static Code Analysis Tools",
    sections=(
        InfoSection(
            heading="Tooling",
            paragraphs=(
                "A curated list of tools used for static analysis in the context of "
                "software security and cryptographic vulnerability detection.",
            ),
        ),
    ),
    resources=(
        ExternalLink(
            "Semgrep",
            "Lightweight, open-source static analysis tool that supports custom rules "
            "for finding security issues, including cryptographic misuses.",
            "https://semgrep.dev/",
        ),
        ExternalLink(
            "Bandit",
            "Python-specific static analyzer that inspects code for security issues, "
            "particularly common cryptographic and input-handling vulnerabilities.",
            "https://bandit.readthedocs.io/",
        ),
        ExternalLink(
            "ChatGPT (as SAST)",
            "LLMs can support static code analysis by reasoning about logic, structure "
            "and vulnerabilities, especially for complex patterns or logic flaws.",
            "https://openai.com/chatgpt",
        ),
        ExternalLink(
            "CodeQL",
            "Static analysis engine developed by GitHub for writing queries that "
            "identify vulnerabilities across codebases.",
            "https://codeql.github.com/",
        ),
        ExternalLink(
            "SonarQube",
            "Widely used static code quality and security analyzer with support for "
            "multiple languages.",
            "https://www.sonarsource.com/products/sonarqube/",
        ),
    ),
)

DOCS = InfoPage(
    path="/docs",
    title="Documentation",
    sections=(
        InfoSection(
            heading="References",
            paragraphs=(
                "Useful documentation and references about cryptography and secure "
                "coding.",
            ),
        ),
    ),
    resources=(
        ExternalLink(
            "Intro to Cryptography",
            "A beginner-friendly explanation of basic cryptographic principles, "
            "including symmetric and asymmetric encryption, hashing and key "
            "management.",
            "https://cryptography.io/en/latest/",
        ),
        ExternalLink(
            "OWASP Cryptographic Failures",
            "The OWASP Top 10 entry for cryptographic weaknesses, updated regularly "
            "and packed with examples.",
            "https://owasp.org/Top10/A02_2021-Cryptographic_Failures/",
        ),
        ExternalLink(
            "NIST Cryptographic Standards",
            "Official guidelines and recommendations by NIST on approved algorithms "
            "and key lengths.",
            "https://csrc.nist.gov/publications/sp",
        ),
    ),
)

SITE_PAGES = (HOME, INFO, CATEGORY_OVERVIEW, TOOLS, DOCS)
