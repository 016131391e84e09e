"""
relove/rules/content.py
Static content for the rule tables: missions, outreach templates,
rewrite templates and greenlight advice.

Content is data. Reword, translate or extend these tables freely.
Rule order lives in the rule modules and does not depend on wording.
Only two positions matter: SAFE_ALTERNATIVES[0] is the rewrite fallback,
and the first 'selfcare' mission is the stabilising pick.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from relove.models.record import Mission

# ── MISSIONS ─────────────────────────────────────────────────

MISSIONS: Tuple[Mission, ...] = (
    Mission(
        title    = "Mindful Morning Routine",
        content  = "Start your day with 20 minutes of journaling and meditation. "
                   "Focus on gratitude and your personal growth goals.",
        category = "selfcare",
    ),
    Mission(
        title    = "Physical Activity Challenge",
        content  = "Take a 45-minute walk in nature or hit the gym. "
                   "Physical movement helps process emotions and builds confidence.",
        category = "physical",
    ),
    Mission(
        title    = "Skill Development Session",
        content  = "Dedicate 1 hour to learning something new - a language, instrument, "
                   "or professional skill. Growth attracts quality people.",
        category = "growth",
    ),
    Mission(
        title    = "Social Connection Time",
        content  = "Reach out to a friend or family member you haven't spoken to in a while. "
                   "Rebuild your support network.",
        category = "social",
    ),
    Mission(
        title    = "Creative Expression",
        content  = "Engage in creative activities - write, draw, cook, or craft. "
                   "Channel your emotions into something productive.",
        category = "growth",
    ),
)


def first_mission(category: str, catalog: Tuple[Mission, ...] = MISSIONS) -> Mission:
    """First mission tagged `category`; catalog[0] if none is."""
    found: Optional[Mission] = next((m for m in catalog if m.category == category), None)
    return found or catalog[0]


# ── OUTREACH TEMPLATES (daily action) ────────────────────────

MESSAGE_TEMPLATES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'light_checkin': (
        "Hey, hope you're having a good week",
        "Just wanted to say hi and see how things are going",
        "Thought of you today - hope all is well",
    ),
    'curiosity_based': (
        "Saw something today that reminded me of that conversation we had about [topic]",
        "How did that [project/event] you mentioned turn out?",
        "Just curious - did you end up trying that [restaurant/activity] we talked about?",
    ),
    'value_sharing': (
        "Had an interesting experience today that made me think of our discussions",
        "Learned something cool today and thought you might find it interesting too",
        "Just had a small win and wanted to share the positive energy",
    ),
})

MESSAGE_TITLES: Mapping[str, str] = MappingProxyType({
    'light_checkin':   "Light Check-in",
    'curiosity_based': "Curiosity-Based Outreach",
    'value_sharing':   "Value Sharing",
})

# ── REWRITE TEMPLATES (safe text) ────────────────────────────

SAFE_ALTERNATIVES: Tuple[str, ...] = (
    "Hey, hope you're having a great week",
    "Just wanted to say hi and see how things are going",
    "Thought of you today - hope all is well",
    "Had a good day today and wanted to share the positive energy",
    "Hope your [day/week] is going smoothly",
    "Just checking in - hope you're doing well",
    "Saw something today that made me smile and think of you",
    "Hope you're taking care of yourself",
)

CURIOSITY_ALTERNATIVES: Tuple[str, ...] = (
    "How did that [project] you mentioned turn out?",
    "Did you end up trying that [place] we talked about?",
    "Just curious - how's [thing they mentioned] going?",
    "Remembered our conversation about [topic] - how's that developing?",
    "Been wondering how your [goal/project] is progressing",
)

REWRITE_POOLS: Tuple[Tuple[str, ...], ...] = (SAFE_ALTERNATIVES, CURIOSITY_ALTERNATIVES)

# ── GREENLIGHT ADVICE ────────────────────────────────────────

NEXT_STEPS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'red': (
        "Focus on self-care activities. Journal about your feelings and work on personal projects.",
        "Take this time to reconnect with friends and family. Build your support network.",
        "Engage in physical activities like gym, sports, or long walks to process emotions.",
        "Work on personal development - read, learn new skills, pursue hobbies.",
        "Practice mindfulness and meditation to center yourself emotionally.",
    ),
    'yellow': (
        "Continue personal growth but start preparing for potential contact.",
        "Reflect on what you want to communicate and practice staying centered.",
        "Focus on activities that build confidence and positive energy.",
        "Consider what value you can bring to the interaction when the time comes.",
        "Maintain emotional stability while staying open to opportunities.",
    ),
    'green': (
        "You can reach out with a light, positive message focused on sharing value.",
        "Keep the message brief, positive, and free from pressure or neediness.",
        "Share something interesting or ask about something they mentioned before.",
        "Maintain confident, relaxed energy in your communication.",
        "Be prepared to give space if they don't respond immediately.",
    ),
})

BLOCKED_NEXT_STEP = (
    "Focus completely on personal growth. Blocked status requires significant "
    "time and change before any hope of reconnection."
)
PATIENCE_NEXT_STEP = "Use this time productively for self-improvement activities."
NEGATIVE_CAUTION_NEXT_STEP = (
    "If you do reach out, make it very light and value-focused. Be prepared for no response."
)
NO_RESPONSE_WAIT_NEXT_STEP = "Silence is a response. Focus on yourself and let them process."
NO_RESPONSE_RETRY_NEXT_STEP = (
    "If you reach out, make it completely pressure-free and be prepared for continued silence."
)
