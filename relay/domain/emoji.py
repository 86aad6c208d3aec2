"""Static Slack shortcode -> emoji glyph table."""

from typing import Dict

EMOJI: Dict[str, str] = {
    # Faces
    "smile": "😄",
    "smiley": "😃",
    "grinning": "😀",
    "grin": "😁",
    "laughing": "😆",
    "satisfied": "😆",
    "sweat_smile": "😅",
    "joy": "😂",
    "rofl": "🤣",
    "slightly_smiling_face": "🙂",
    "upside_down_face": "🙃",
    "wink": "😉",
    "blush": "😊",
    "innocent": "😇",
    "heart_eyes": "😍",
    "kissing_heart": "😘",
    "yum": "😋",
    "stuck_out_tongue": "😛",
    "stuck_out_tongue_winking_eye": "😜",
    "sunglasses": "😎",
    "nerd_face": "🤓",
    "thinking_face": "🤔",
    "neutral_face": "😐",
    "expressionless": "😑",
    "no_mouth": "😶",
    "smirk": "😏",
    "unamused": "😒",
    "rolling_eyes": "🙄",
    "grimacing": "😬",
    "relieved": "😌",
    "pensive": "😔",
    "sleepy": "😪",
    "sleeping": "😴",
    "mask": "😷",
    "dizzy_face": "😵",
    "confused": "😕",
    "worried": "😟",
    "slightly_frowning_face": "🙁",
    "open_mouth": "😮",
    "hushed": "😯",
    "astonished": "😲",
    "flushed": "😳",
    "cry": "😢",
    "sob": "😭",
    "scream": "😱",
    "confounded": "😖",
    "persevere": "😣",
    "disappointed": "😞",
    "sweat": "😓",
    "weary": "😩",
    "tired_face": "😫",
    "triumph": "😤",
    "rage": "😡",
    "angry": "😠",
    "smiling_imp": "😈",
    "skull": "💀",
    "poop": "💩",
    "hankey": "💩",
    "ghost": "👻",
    "robot_face": "🤖",
    "see_no_evil": "🙈",
    "hear_no_evil": "🙉",
    "speak_no_evil": "🙊",
    # Hands and people
    "+1": "👍",
    "thumbsup": "👍",
    "-1": "👎",
    "thumbsdown": "👎",
    "ok_hand": "👌",
    "wave": "👋",
    "clap": "👏",
    "raised_hands": "🙌",
    "pray": "🙏",
    "muscle": "💪",
    "point_up": "☝️",
    "point_right": "👉",
    "point_left": "👈",
    "v": "✌️",
    "fist": "✊",
    "facepalm": "🤦",
    "shrug": "🤷",
    "eyes": "👀",
    # Hearts
    "heart": "❤️",
    "broken_heart": "💔",
    "green_heart": "💚",
    "blue_heart": "💙",
    "yellow_heart": "💛",
    "purple_heart": "💜",
    "black_heart": "🖤",
    "sparkling_heart": "💖",
    "two_hearts": "💕",
    # Symbols
    "fire": "🔥",
    "sparkles": "✨",
    "star": "⭐",
    "star2": "🌟",
    "zap": "⚡",
    "boom": "💥",
    "100": "💯",
    "tada": "🎉",
    "confetti_ball": "🎊",
    "balloon": "🎈",
    "gift": "🎁",
    "trophy": "🏆",
    "rocket": "🚀",
    "bulb": "💡",
    "bell": "🔔",
    "lock": "🔒",
    "unlock": "🔓",
    "key": "🔑",
    "hammer": "🔨",
    "wrench": "🔧",
    "gear": "⚙️",
    "link": "🔗",
    "pushpin": "📌",
    "memo": "📝",
    "calendar": "📆",
    "email": "📧",
    "phone": "☎️",
    "computer": "💻",
    "bug": "🐛",
    "warning": "⚠️",
    "no_entry": "⛔",
    "x": "❌",
    "heavy_check_mark": "✔️",
    "white_check_mark": "✅",
    "question": "❓",
    "exclamation": "❗",
    "hourglass": "⌛",
    "zzz": "💤",
    "arrow_up": "⬆️",
    "arrow_down": "⬇️",
    "arrow_left": "⬅️",
    "arrow_right": "➡️",
    # Nature and food
    "sunny": "☀️",
    "cloud": "☁️",
    "umbrella": "☔",
    "snowflake": "❄️",
    "rainbow": "🌈",
    "earth_americas": "🌎",
    "moon": "🌔",
    "seedling": "🌱",
    "evergreen_tree": "🌲",
    "cactus": "🌵",
    "rose": "🌹",
    "sunflower": "🌻",
    "dog": "🐶",
    "cat": "🐱",
    "mouse": "🐭",
    "rabbit": "🐰",
    "fox_face": "🦊",
    "bear": "🐻",
    "panda_face": "🐼",
    "penguin": "🐧",
    "snake": "🐍",
    "turtle": "🐢",
    "octopus": "🐙",
    "crab": "🦀",
    "lobster": "🦞",
    "unicorn_face": "🦄",
    "apple": "🍎",
    "banana": "🍌",
    "pizza": "🍕",
    "hamburger": "🍔",
    "taco": "🌮",
    "cake": "🍰",
    "cookie": "🍪",
    "doughnut": "🍩",
    "coffee": "☕",
    "tea": "🍵",
    "beer": "🍺",
    "beers": "🍻",
    "wine_glass": "🍷",
}
