# Lookup tables shared by the codecs. Built once at import, never mutated.

# Morse code
MORSE = {
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..',
    '0': '-----', '1': '.----', '2': '..---', '3': '...--', '4': '....-',
    '5': '.....', '6': '-....', '7': '--...', '8': '---..', '9': '----.',
    '.': '.-.-.-', ',': '--..--', '?': '..--..', "'": '.----.',
    '!': '-.-.--', '/': '-..-.', '(': '-.--.', ')': '-.--.-', '&': '.-...',
    ':': '---...', ';': '-.-.-.', '=': '-...-', '+': '.-.-.', '-': '-....-',
    '_': '..--.-', '"': '.-..-.', '$': '...-..-', '@': '.--.-.'
}
MORSE_WORD_SEPARATOR = '/'
REV_MORSE = {v: k for k, v in MORSE.items()}

# Base64 alphabet (standard, RFC 4648)
B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# Emoji presets. Keys of 'letters' are uppercase letters, the others are
# lowercase whole words. Declaration order matters: see core.emoji_encode.
EMOJI_PRESETS = {
    'letters': {
        'A': '🅰️', 'B': '🅱️', 'C': '©️', 'D': '🇩', 'E': '📧',
        'F': '🎏', 'G': '🇬', 'H': '🏨', 'I': 'ℹ️', 'J': '🎷',
        'K': '🎋', 'L': '🇱', 'M': 'Ⓜ️', 'N': '🎵', 'O': '⭕',
        'P': '🅿️', 'Q': '🇶', 'R': '®️', 'S': '💰', 'T': '🆃',
        'U': '⛎', 'V': '♈', 'W': '〰️', 'X': '❌', 'Y': '💴',
        'Z': '💤'
    },
    'words': {
        'love': '❤️', 'heart': '💖', 'fire': '🔥', 'water': '💧',
        'sun': '☀️', 'moon': '🌙', 'star': '⭐', 'earth': '🌍',
        'tree': '🌳', 'flower': '🌸', 'cat': '🐱', 'dog': '🐶',
        'happy': '😊', 'sad': '😢', 'angry': '😠', 'surprised': '😲',
        'cool': '😎', 'party': '🎉', 'music': '🎵', 'book': '📚',
        'phone': '📱', 'computer': '💻', 'car': '🚗', 'house': '🏠',
        'food': '🍕', 'coffee': '☕', 'beer': '🍺', 'pizza': '🍕',
        'money': '💰', 'time': '⏰', 'work': '💼', 'sleep': '😴'
    },
    'custom': {
        'hello': '👋', 'goodbye': '👋', 'yes': '✅', 'no': '❌',
        'good': '👍', 'bad': '👎', 'ok': '👌', 'peace': '✌️',
        'rock': '🤘', 'thumb': '👍', 'clap': '👏', 'pray': '🙏'
    },
}

# glyph -> key; on collisions the key declared last wins
REV_EMOJI_PRESETS = {
    preset: {glyph: key for key, glyph in mapping.items()}
    for preset, mapping in EMOJI_PRESETS.items()
}
