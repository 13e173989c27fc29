# emojis.py
"""
Emoji markers shared by log lines and chat replies.
"""

EMOJI_TICK = "✅"
EMOJI_CROSS = "❌"
EMOJI_CAUTION = "⚠️"
EMOJI_SEARCH = "🔍"
EMOJI_BUILDING = "🏢"
EMOJI_PARKING = "🅿️"
EMOJI_PIN = "📍"
EMOJI_CAR = "🚗"
EMOJI_MONEY = "💰"
EMOJI_TICKET = "🎫"
EMOJI_BULB = "💡"
EMOJI_CHART = "📊"
EMOJI_TEST = "🧪"
