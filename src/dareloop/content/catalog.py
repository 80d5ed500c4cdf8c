"""Built-in dare packs.

Each pack ships twelve dares. Premium packs must be unlocked before a
session can start with them.
"""

from typing import Dict, List

from .base import PackInfo

PACKS: Dict[str, PackInfo] = {
    "Family Friendly": PackInfo(
        "Family Friendly", "Fun for the whole family! Dares suitable for all ages."
    ),
    "IceBreakers": PackInfo(
        "IceBreakers", "Get to know each other with these light-hearted challenges."
    ),
    "Couples": PackInfo(
        "Couples", "Strengthen your bond with fun and romantic dares."
    ),
    "Out In Public": PackInfo(
        "Out In Public", "Dares that involve interactions in social settings."
    ),
    "Music Mania": PackInfo(
        "Music Mania",
        "For music lovers, dares involve singing, dancing, or performing to your favorite tunes.",
    ),
    "Office Fun": PackInfo(
        "Office Fun",
        "Lighten up the workday with office-appropriate dares that build teamwork and camaraderie.",
    ),
    "Adventure Seekers": PackInfo(
        "Adventure Seekers",
        "Challenge your limits with thrilling and adventurous dares perfect for the fearless.",
    ),
    "Bar": PackInfo(
        "Bar",
        "Night out? Spice it up with these bar-themed dares. 18+ only.",
        age_restricted=True,
        premium=True,
    ),
    "Spicy": PackInfo(
        "Spicy",
        "Turn up the heat with these daring challenges. 18+ only.",
        age_restricted=True,
        premium=True,
    ),
}

DARES: Dict[str, List[str]] = {
    "Family Friendly": [
        "Sing a song",
        "Dance for 1 minute",
        "Do a funny walk across the room",
        "Tell a joke that makes everyone laugh",
        "Make a silly face and hold it for 10 seconds",
        "Pretend you're a cat and meow around the room",
        "Balance a book on your head",
        "Say the alphabet backwards",
        "Do 10 jumping jacks",
        "Imitate your favorite cartoon character",
        "Create a secret handshake with someone",
        "Pretend to be a statue for 30 seconds",
    ],
    "IceBreakers": [
        "Tell a funny story",
        "Imitate someone",
        "Share an embarrassing moment",
        "Compliment each person in the room",
        "Share your dream job as a child",
        "Do your best celebrity impression",
        "Share a unique talent or party trick",
        "Name five things you like about the person on your right",
        "Describe your first memory",
        "Pretend to walk on a tightrope",
        "Share your go-to dance move",
        "Demonstrate how to make your favorite sandwich",
    ],
    "Couples": [
        "Give a compliment",
        "Hold hands for 5 minutes",
        "Write a love note on a napkin",
        "Share a six-word love story",
        "Dedicate a song to your partner",
        "Share what you admire most about your partner",
        "Give your partner a hug",
        "Reenact your first date in 30 seconds",
        "Whisper a secret to your partner",
        "Do a couples' yoga pose",
        "Share your partner's favorite characteristic",
        "Take a romantic selfie together",
    ],
    "Out In Public": [
        "Wave to a stranger",
        "Yell 'I love dare night!' in public",
        "Ask someone for the time and then tell a joke",
        "Compliment a stranger's outfit",
        "Do a little dance without music",
        "Ask for a high five from a stranger",
        "Sing a song out loud",
        "Act like you recognize someone you don't",
        "Walk like a model down an imaginary runway",
        "Call a random contact and sing 'Happy Birthday'",
        "Propose a toast to everyone around",
        "Take a funny selfie with a statue",
    ],
    "Music Mania": [
        "Perform an air guitar solo to a rock song",
        "Sing the chorus of the last song you listened to",
        "Impersonate a famous singer",
        "Hum a song and others guess it",
        "Dance to a song chosen by the group",
        "Create a band name and album cover idea",
        "Write a short rap about the person to your left",
        "Perform a dramatic opera note",
        "Whistle a popular tune while others guess",
        "Play a song on an imaginary piano",
        "Choose a song and act out the lyrics silently",
        "Sing a song in a silly voice",
    ],
    "Office Fun": [
        "Spin in a chair for 30 seconds",
        "Pretend to be your boss for 1 minute",
        "Organize a quick office parade",
        "Share a funny office story",
        "Take a selfie with the office plant",
        "Lead a 2-minute office workout",
        "Do your best impression of a coworker",
        "Start a spontaneous 'wave' in your office",
        "Create a handshake with the nearest coworker",
        "Leave an anonymous compliment on someone's desk",
        "Tell a joke that's safe for work",
        "Find something in common with everyone in the room",
    ],
    "Adventure Seekers": [
        "Pretend you're climbing a mountain",
        "Mimic an extreme sport using office supplies",
        "Act like a pirate searching for treasure",
        "Describe your dream adventure",
        "Lead the group in a jungle expedition around the room",
        "Do your best animal impression",
        "Invent a new outdoor game",
        "Draw a map of an imaginary island",
        "Pretend you're in a kayak race",
        "Act out a scene from a survival show",
        "Build a 'campfire' with objects around you",
        "Create a quick survival kit with nearby items",
    ],
    "Bar": [
        "Order the strangest drink",
        "Cheers the table next to you",
        "Lead a toast to the bar",
        "Swap a drink with someone (safely)",
        "Sing a karaoke song",
        "Dance with a stranger",
        "Take a shot without flinching",
        "Invent a new cocktail with the bartender",
        "Start a conga line",
        "Pose for a photo with the bouncer",
        "Tell the bar your best joke",
        "Give a speech about your 'first time' at this bar",
    ],
    "Spicy": [
        "Share a secret",
        "Do your sexiest dance",
        "Leave a flirty note for someone",
        "Kiss someone on the cheek",
        "Confess a fantasy",
        "Take an attractive selfie and share it",
        "Seductively eat a piece of fruit",
        "Whisper something cheeky in someone's ear",
        "Send a flirty text to your crush",
        "Serenade someone with a love song",
        "Describe your perfect date in detail",
        "Give someone your best pickup line",
    ],
}


def get_pack(pack_id: str) -> PackInfo:
    """Get built-in pack metadata. Raises KeyError for unknown packs."""
    return PACKS[pack_id]


def list_packs(include_age_restricted: bool = True) -> List[PackInfo]:
    """List built-in packs in display order."""
    return [
        pack for pack in PACKS.values()
        if include_age_restricted or not pack.age_restricted
    ]
