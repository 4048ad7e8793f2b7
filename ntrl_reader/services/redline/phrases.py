# ntrl_reader/services/redline/phrases.py
"""
Phrase lists for redline detection.

Product-tuned constants. Matching is case-insensitive and whole-phrase, so
entries are written in lower case and each must stand on word boundaries.
"""

# CTA / promotional / junk phrases: boilerplate that shouldn't appear in neutral news
PROMOTIONAL_PHRASES = [
    # Social/sharing CTAs
    "share this",
    "save this",
    "subscribe now",
    "subscribe today",
    "sign up now",
    "sign up today",
    "sign up for",
    "watch now",
    "watch live",
    "listen now",
    "download now",
    "click here",
    "tap here",
    "learn more",
    "read more",
    "see more",
    "find out more",

    # Promotional
    "sponsored content",
    "sponsored by",
    "advertisement",
    "paid partnership",
    "affiliate link",
    "related stories",
    "related articles",
    "recommended for you",
    "you may also like",
    "trending now",

    # Newsletter/account CTAs
    "join our newsletter",
    "get our newsletter",
    "create an account",
    "already a subscriber",
    "subscriber exclusive",
    "members only",

    # Engagement bait
    "what do you think",
    "let us know",
    "tell us in the comments",
    "comment below",
    "follow us on",
]

# Manipulative / sensational phrases
MANIPULATIVE_PHRASES = [
    # Urgency/alarm
    "breaking",
    "urgent",
    "must see",
    "must read",
    "you need to know",
    "you won't believe",
    "what you need to know",
    "this changes everything",

    # Sensationalism
    "shocking",
    "stunning",
    "explosive",
    "bombshell",
    "devastating",
    "horrifying",
    "terrifying",
    "nightmare",
    "chaos",
    "crisis",
    "catastrophe",
    "disaster",

    # Conflict amplification
    "slams",
    "blasts",
    "destroys",
    "annihilates",
    "crushes",
    "eviscerates",
    "rips",
    "tears into",
    "lashes out",
    "fires back",

    # Emotional manipulation
    "outrage",
    "fury",
    "backlash",
    "firestorm",
    "uproar",
    "heartbreaking",
    "gut-wrenching",

    # Clickbait patterns
    "you won't believe",
    "the reason why",
    "what happens next",
    "the truth about",
    "the real reason",
    "secret",
    "exposed",
    "revealed",

    # Absolutism
    "unprecedented",
    "historic",
    "landmark",
    "major victory",
    "major defeat",
    "game-changer",
    "breakthrough",
    "ground-breaking",
    "groundbreaking",

    # Fear/danger framing
    "dangerously",
    "deadly",
    "dangerous",
    "threat",
    "threatens",
    "warning",
    "alarming",
    "disturbing",

    # Superlatives (when used manipulatively)
    "massive",
    "huge",
    "enormous",
    "incredible",
    "unbelievable",
    "insane",
    "crazy",
]

# Upper-case words that are names, not emphasis
ACRONYM_ALLOWLIST = frozenset({
    "NASA",
    "NATO",
    "AIDS",
    "COVID",
    "ASAP",
    "RSVP",
    "HTML",
    "HTTP",
    "HTTPS",
    "USA",
    "UK",
    "EU",
    "UN",
    "FBI",
    "CIA",
    "NSA",
    "POTUS",
    "GDP",
    "CEO",
    "CFO",
    "COO",
    "NOAA",
    "NCAA",
    "NFL",
    "NBA",
    "MLB",
    "NHL",
})
