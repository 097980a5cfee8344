"""Mock review generator with deterministic seeding.

Synthesizes plausible product reviews without storing anything. The
output is a pure function of the product identifier, the requested
count, the optional rating filter and the generation time, so the same
request always returns the same reviews.

The pseudo-random stream is a 31-bit linear congruential generator
seeded from the last 8 hex digits of the product identifier.
"""

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from string import hexdigits
from typing import Any


# ============================================================================
# Constants
# ============================================================================

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF

SEED_HEX_DIGITS = 8

# Probability of each star rating, 1 through 5
RATING_WEIGHTS: tuple[float, ...] = (0.05, 0.1, 0.15, 0.3, 0.4)

# Reviews are dated within this many days before generation time
MAX_REVIEW_AGE_DAYS = 180

REVIEW_TEMPLATES: dict[int, tuple[str, ...]] = {
    5: (
        "Excellent product! Highly recommended for anyone looking for quality.",
        "Outstanding value for money. Exceeded my expectations in every way.",
        "Perfect! Exactly what I was looking for. Great build quality.",
        "Amazing product with great features. Very satisfied with my purchase.",
        "Top-notch quality and excellent customer service. Five stars!",
    ),
    4: (
        "Good product overall. Minor issues but generally satisfied.",
        "Great value for the price. Would recommend to others.",
        "Solid product with good features. Only minor complaints.",
        "Very good quality. Works as expected with no major issues.",
        "Happy with my purchase. Good product for the price point.",
    ),
    3: (
        "Average product. Does the job but nothing special.",
        "Okay quality. Some features could be improved.",
        "Decent product but has room for improvement.",
        "It's alright. Meets basic requirements but could be better.",
        "Fair product. Works fine but not outstanding.",
    ),
    2: (
        "Disappointed with the quality. Expected better for the price.",
        "Has some issues that need to be addressed.",
        "Not great. Several problems encountered during use.",
        "Below average quality. Would not recommend.",
        "Poor value for money. Many better alternatives available.",
    ),
    1: (
        "Terrible product. Complete waste of money.",
        "Very poor quality. Broke after minimal use.",
        "Worst purchase I've made. Avoid at all costs.",
        "Absolutely horrible. Does not work as advertised.",
        "Extremely disappointed. Requesting a refund.",
    ),
}

REVIEWERS: tuple[str, ...] = (
    "Alex Johnson",
    "Sarah Miller",
    "Mike Brown",
    "Emily Davis",
    "John Wilson",
    "Jessica Garcia",
    "David Martinez",
    "Lisa Anderson",
    "Ryan Thompson",
    "Amanda White",
    "Chris Lee",
    "Jennifer Taylor",
    "Mark Robinson",
    "Laura Clark",
    "Kevin Lewis",
)


# ============================================================================
# Stream helpers
# ============================================================================


def seed_from_product_id(product_id: str) -> int:
    """Derive the generator seed from a product identifier.

    Args:
        product_id: Product identifier.

    Returns:
        The last 8 characters parsed as hex, or 0 when the identifier is
        shorter than 8 characters or they are not all hex digits.
    """
    tail = product_id[-SEED_HEX_DIGITS:]
    if len(tail) < SEED_HEX_DIGITS or any(c not in hexdigits for c in tail):
        return 0
    return int(tail, 16)


def next_state(state: int) -> int:
    """Advance the LCG by one step."""
    return (state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK


def rating_for_state(state: int) -> int:
    """Map a generator state to a 1-5 star rating.

    Args:
        state: Current generator state.

    Returns:
        The first rating whose cumulative weight covers the state's
        normalized value; 5 if floating error leaves none.
    """
    value = (state % 100) / 100
    cumulative = 0.0
    for index, weight in enumerate(RATING_WEIGHTS):
        cumulative += weight
        if value <= cumulative:
            return index + 1
    return 5


# ============================================================================
# Review Model
# ============================================================================


@dataclass(frozen=True)
class Review:
    """A synthesized product review.

    Attributes:
        id: Review identifier, review_<product_id>_<slot>.
        rating: Star rating 1-5.
        comment: Review text.
        reviewer: Reviewer display name.
        date: When the review was "written".
        verified: Whether the purchase is marked verified.
        helpful: Helpful vote count.
    """

    id: str
    rating: int
    comment: str
    reviewer: str
    date: datetime
    verified: bool
    helpful: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


# ============================================================================
# Review Generator
# ============================================================================


class ReviewGenerator:
    """Generates reproducible mock reviews for a product.

    Example usage:
        generator = ReviewGenerator()
        reviews = generator.generate("64b7f3a2c9e1d4f5abcdef01", limit=5)
    """

    def __init__(self, max_attempts_per_review: int = 100) -> None:
        """Initialize generator.

        Args:
            max_attempts_per_review: Attempt budget per requested review.
                Bounds the retry loop when a rating filter is rare or
                can never match.
        """
        if max_attempts_per_review < 1:
            raise ValueError("max_attempts_per_review must be at least 1")
        self.max_attempts_per_review = max_attempts_per_review

    def generate(
        self,
        product_id: str,
        limit: int = 10,
        rating: int | None = None,
        now: datetime | None = None,
    ) -> list[Review]:
        """Generate up to `limit` reviews.

        Args:
            product_id: Product identifier; drives the seed and review IDs.
            limit: Maximum number of reviews to return.
            rating: Only return reviews with this star rating.
            now: Generation time that review dates are relative to.
                Defaults to the current UTC time.

        Returns:
            Reviews in generation order. Fewer than `limit` when a rating
            filter exhausts the attempt budget.
        """
        if limit <= 0:
            return []

        generated_at = now or datetime.now(timezone.utc)
        state = seed_from_product_id(product_id)
        max_attempts = limit * self.max_attempts_per_review
        reviews: list[Review] = []
        attempts = 0

        while len(reviews) < limit and attempts < max_attempts:
            attempts += 1
            star_rating = rating_for_state(state)

            if rating is not None and star_rating != rating:
                state = next_state(state)
                continue

            slot = len(reviews)
            templates = REVIEW_TEMPLATES[star_rating]
            reviews.append(
                Review(
                    id=f"review_{product_id}_{slot}",
                    rating=star_rating,
                    comment=templates[state % len(templates)],
                    reviewer=REVIEWERS[(state + slot) % len(REVIEWERS)],
                    date=generated_at - timedelta(days=state % MAX_REVIEW_AGE_DAYS),
                    verified=state % 4 != 0,
                    helpful=max(0, state % 20 - 5),
                )
            )
            state = next_state(state)

        return reviews
