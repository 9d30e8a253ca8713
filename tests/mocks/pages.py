"""Page builders for tests."""

from src.core.pages import CVEReference, CWEPage, Explanation


def make_cwe_page(
    cwe_id: str = "CWE-327",
    good: tuple[str, ...] = ("good-0", "good-1", "good-2"),
    bad: tuple[str, ...] = ("bad-0", "bad-1"),
) -> CWEPage:
    """Build a CWE page with placeholder slides.

    Args:
        cwe_id: Identifier of the page.
        good: Slides of the good-code slideshow.
        bad: Slides of the bad-code slideshow.

    Returns:
        CWEPage: A page with one CVE reference.
    """
    return CWEPage(
        cwe_id=cwe_id,
        title=f"Test page for {cwe_id}",
        best_practices=("Do this",),
        bad_practices=("Not that",),
        good_samples=good,
        bad_samples=bad,
        explanation=Explanation(
            heading=f"Understanding {cwe_id}",
            paragraphs=("Explanation.",),
            cve_references=(CVEReference("CVE-2000-0001", "Example."),),
        ),
    )
