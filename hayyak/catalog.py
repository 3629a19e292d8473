"""Hardcoded Dubai data served when the matching Firestore collection is empty."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .models import MoodCategory, MoodPlace, Restaurant, RouteStop, Suggestion

DEFAULT_ROUTES: Tuple[RouteStop, ...] = (
    RouteStop(
        id="burj_khalifa",
        title="Burj Khalifa",
        time="10:00 AM - 12:00 PM",
        icon="fa-landmark",
        coords=(25.1972, 55.2744),
        crowdLevel=95,
    ),
    RouteStop(
        id="dubai_mall",
        title="The Dubai Mall",
        time="12:30 PM - 3:00 PM",
        icon="fa-shopping-bag",
        coords=(25.1983, 55.2795),
        crowdLevel=85,
    ),
    RouteStop(
        id="lunch_timeout",
        title="Lunch at Time Out Market",
        time="3:00 PM - 4:00 PM",
        icon="fa-utensils",
        coords=(25.2028, 55.2833),
        crowdLevel=80,
    ),
    RouteStop(
        id="fountain_show",
        title="Dubai Fountain Show",
        time="6:00 PM",
        icon="fa-water",
        coords=(25.1959, 55.2758),
        crowdLevel=90,
    ),
)

DEFAULT_SUGGESTIONS: Tuple[Suggestion, ...] = (
    Suggestion(
        id="s1",
        title="Coffee Break at % Arabica",
        info="Famous for its minimalist design and great coffee.",
        icon="fa-coffee",
        realTime=False,
        rating=4.5,
        coords=(25.1990, 55.2790),
    ),
    Suggestion(
        id="s2",
        title="Ice Rink Fun",
        info="Escape the heat at the Dubai Ice Rink.",
        icon="fa-snowflake",
        realTime=False,
        rating=4.4,
        coords=(25.1975, 55.2785),
    ),
    Suggestion(
        id="s3",
        title="Light Traffic Alert",
        info="Roads around Downtown are clear. Good time to travel!",
        icon="fa-traffic-light",
        realTime=True,
        rating=None,
        coords=None,
    ),
    Suggestion(
        id="s4",
        title="Sunset Photo Spot",
        info="Head to the waterfront for amazing sunset views of Burj Khalifa.",
        icon="fa-camera",
        realTime=True,
        rating=None,
        coords=(25.1945, 55.2730),
    ),
)

LUXURY_RESTAURANTS: Tuple[Restaurant, ...] = (
    Restaurant(
        name="At.mosphere, Burj Khalifa",
        info="Fine dining with breathtaking views.",
        icon="fa-utensils",
        coords=(25.1972, 55.2744),
        price="$$$$",
        calories="Varies",
    ),
    Restaurant(
        name="Pierchic",
        info="Romantic seafood restaurant over the water.",
        icon="fa-fish",
        coords=(25.1313, 55.1822),
        price="$$$$",
        calories="Varies",
    ),
    Restaurant(
        name="Zuma Dubai",
        info="Contemporary Japanese izakaya.",
        icon="fa-sushi",
        coords=(25.2143, 55.2785),
        price="$$$",
        calories="Varies",
    ),
)


def _mood(keywords: Tuple[str, ...], response: str, *places: Tuple[str, str, object]) -> MoodCategory:
    return MoodCategory(
        keywords=keywords,
        response=response,
        places=tuple(MoodPlace(name=name, info=info, coords=coords) for name, info, coords in places),
    )


DEFAULT_MOOD_SUGGESTIONS: Mapping[str, MoodCategory] = MappingProxyType(
    {
        "happy-energetic": _mood(
            (
                "happy", "excited", "energized", "motivated", "inspired", "joyful", "overjoyed",
                "giggly", "empowered", "strong", "confident", "optimistic", "cheerful", "amazed",
                "surprised", "impressed", "fulfilled", "in love", "free",
            ),
            "That's wonderful to hear! Let's keep the positive energy flowing. "
            "Here are some exciting places to check out:",
            ("Motiongate Dubai", "A thrilling Hollywood-inspired theme park.", (24.9200, 55.0045)),
            ("Kite Beach", "Perfect for water sports and a vibrant atmosphere.", (25.1782, 55.2267)),
            ("City Walk", "A dynamic outdoor destination with shopping and entertainment.", (25.2084, 55.2624)),
        ),
        "calm-content": _mood(
            (
                "calm", "relaxed", "hopeful", "grateful", "content", "contented", "relieved",
                "mellow", "satisfied", "appreciated", "loved", "secure", "reflective", "sentimental",
            ),
            "It's great that you're in a peaceful state of mind. "
            "Here are some serene spots to enjoy this feeling:",
            (
                "Al Fahidi Historical Neighbourhood",
                "Wander through the quiet, historic alleyways of Old Dubai.",
                (25.2630, 55.3020),
            ),
            ("Dubai Miracle Garden", "A beautiful and peaceful garden to stroll through.", (25.0559, 55.2458)),
            ("The Green Planet", "Immerse yourself in a tropical rainforest.", (25.2090, 55.2642)),
        ),
        "sad-lonely": _mood(
            ("sad", "lonely", "depressed", "hurt", "sorrowful", "mournful", "disconnected"),
            "I'm sorry to hear you're feeling this way. Sometimes a change of scenery can help. "
            "Here are some gentle suggestions:",
            ("Jumeirah Public Beach", "A quiet walk by the sea can be very therapeutic.", (25.2165, 55.2553)),
            ("Ailuromania Cat Cafe", "Spending time with furry friends can be very comforting.", (25.2198, 55.2698)),
            ("A quiet coffee shop", "Find a cozy corner to relax with a warm drink.", None),
        ),
        "tired-bored": _mood(
            ("tired", "bored", "sleepy", "lazy", "indifferent", "weak"),
            "It sounds like you need a little boost or a place to recharge. Here are a few ideas:",
            ("Find a local park bench", "Sometimes just sitting and watching the world go by is enough.", None),
            ("The Espresso Lab", "Known for excellent coffee to help you recharge.", (25.2201, 55.2711)),
            ("VOX Cinemas", "Escape into a movie for a couple of hours.", (25.1182, 55.2004)),
        ),
        "anxious-stressed": _mood(
            (
                "anxious", "nervous", "scared", "worried", "overwhelmed", "insecure", "uncertain",
                "vulnerable", "frightened", "shaky", "tense", "stressed", "conflicted",
            ),
            "It's okay to feel that way. Let's find a place where you can take a deep breath "
            "and clear your mind:",
            (
                "Safa Park",
                "A large, green space perfect for a calming walk or just sitting by the lake.",
                (25.1900, 55.2480),
            ),
            (
                "Talise Ottoman Spa",
                "Consider a spa treatment to de-stress and relax your body and mind.",
                (25.0935, 55.1281),
            ),
            ("Yoga La Vie", "A gentle yoga or meditation class could help center you.", (25.0930, 55.1560)),
        ),
        "angry-frustrated": _mood(
            ("angry", "frustrated", "annoyed", "grumpy", "bothered", "displeased", "resentful"),
            "I understand. Sometimes you need to let off some steam. "
            "Here are some activities that might help:",
            ("The Smash Room", "Safely break things to release frustration.", (25.1388, 55.3881)),
            (
                "A local gym or running track",
                "Channeling that energy into a workout can be very effective.",
                None,
            ),
            ("Topgolf Dubai", "Hit some golf balls and focus on a target.", (25.0388, 55.2000)),
        ),
        "confused-curious": _mood(
            ("confused", "curious", "distracted", "baffled", "perplexed", "stunned", "lost"),
            "When you're feeling a bit lost or curious, exploring something new can be grounding. "
            "Check out these thought-provoking places:",
            (
                "Museum of the Future",
                "Explore what tomorrow might look like. It's full of inspiring ideas.",
                (25.2193, 55.2813),
            ),
            (
                "Jameel Arts Centre",
                "Wander through contemporary art exhibitions and get lost in creativity.",
                (25.2391, 55.3431),
            ),
            (
                "Alserkal Avenue",
                "A hub of art galleries and creative spaces to spark new thoughts.",
                (25.1400, 55.2200),
            ),
        ),
        "shame-guilt": _mood(
            ("guilt", "guilty", "embarrassed", "shy", "ashamed"),
            "These feelings can be tough. It might help to be in a place where you can be "
            "anonymous and just observe. Here are some low-pressure ideas:",
            (
                "The Dubai Mall",
                "It's easy to blend in with the crowd and just walk around without any pressure.",
                (25.1983, 55.2795),
            ),
            ("A public library", "A quiet, anonymous space where you can sit with a book.", None),
            ("Watch the Dubai Fountain", "Lose yourself in the spectacle of the water and lights.", (25.1959, 55.2758)),
        ),
    }
)
