"""
Holiday themes - visual, sound and quote settings for each holiday.

A theme is pure presentation data keyed by holiday id. A holiday without an
entry renders with the default theme.
"""
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

SoundTheme = Literal[
    "default",    # R2-D2 beeps
    "jingle",     # Sleigh bells, holiday chimes
    "spooky",     # Theremin, ghost sounds
    "patriotic",  # Fanfare, fireworks
    "romantic",   # Harp, gentle tones
    "festive",
    "peaceful",
    "drumbeat",   # African/cultural drums
    "celtic",
    "asian",      # Gongs, traditional
    "reverent",   # Subdued
]
SoundMode = Literal["replace", "layer", "default"]
ParticleSpeed = Literal["slow", "normal", "fast"]

DEFAULT_WELCOME = "Welcome back, {name}!"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ThemeColors(_Frozen):
    primary: str
    secondary: str
    accent: str
    background: str  # CSS color or gradient
    text: str
    glow: Optional[str] = None


class ThemeParticles(_Frozen):
    shapes: list[str]
    colors: list[str]
    count: int = 80
    speed: Optional[ParticleSpeed] = None


class ThemeSounds(_Frozen):
    theme: SoundTheme = "default"
    default_mode: SoundMode = "default"


class ThemeQuotes(_Frozen):
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    welcome_override: Optional[str] = None  # Template with {name}
    category_filter: Optional[list[str]] = None


class ThemeDecorations(_Frozen):
    border: Optional[str] = None
    overlay: Optional[str] = None  # e.g. "snow", "hearts", "leaves"
    icon_emoji: Optional[str] = None
    progression_emoji: Optional[list[str]] = None  # One entry per holiday day


class HolidayTheme(_Frozen):
    colors: ThemeColors
    particles: ThemeParticles
    sounds: ThemeSounds = Field(default_factory=ThemeSounds)
    quotes: ThemeQuotes = Field(default_factory=ThemeQuotes)
    decorations: ThemeDecorations = Field(default_factory=ThemeDecorations)
    respectful: bool = False  # Subdued animations for solemn observances


NUMBERED_DAYS = ["1️⃣", "2️⃣", "3️⃣", "4️⃣", "5️⃣", "6️⃣", "7️⃣", "8️⃣"]
PATRIOTIC = ["#002868", "#BF0A30", "#FFFFFF"]


HOLIDAY_THEMES: dict[str, HolidayTheme] = {
    # January
    "new-years-day": HolidayTheme(
        colors=ThemeColors(
            primary="#FFD700", secondary="#C0C0C0", accent="#000000",
            background="linear-gradient(135deg, #1a1a2e 0%, #16213e 50%, #0f3460 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle", "firework"],
            colors=["#FFD700", "#C0C0C0", "#FFFFFF", "#E5C100"], count=100, speed="fast",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Happy New Year! ", welcome_override="Welcome to a new year, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🎆", overlay="fireworks"),
    ),
    "mlk-day": HolidayTheme(
        colors=ThemeColors(
            primary="#B22234", secondary="#000000", accent="#228B22",
            background="linear-gradient(135deg, #2c1810 0%, #1a1a1a 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["dove", "star"],
            colors=["#FFFFFF", "#FFD700", "#B22234", "#228B22"], count=40, speed="slow",
        ),
        sounds=ThemeSounds(theme="peaceful", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Dream big. ", category_filter=["Motivation", "Leadership"]),
        decorations=ThemeDecorations(icon_emoji="✊"),
        respectful=True,
    ),
    "lunar-new-year": HolidayTheme(
        colors=ThemeColors(
            primary="#FF0000", secondary="#FFD700", accent="#000000",
            background="linear-gradient(135deg, #8B0000 0%, #FF4500 50%, #FFD700 100%)",
            text="#FFFFFF", glow="#FF0000",
        ),
        particles=ThemeParticles(
            shapes=["lantern", "dragon", "coin", "firework"],
            colors=["#FF0000", "#FFD700", "#FF4500", "#FFA500"], count=80, speed="normal",
        ),
        sounds=ThemeSounds(theme="asian", default_mode="replace"),
        quotes=ThemeQuotes(prefix="Gong Xi Fa Cai! ", welcome_override="Prosperous wishes, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🧧", overlay="lanterns"),
    ),
    # February
    "groundhog-day": HolidayTheme(
        colors=ThemeColors(
            primary="#8B4513", secondary="#228B22", accent="#87CEEB",
            background="linear-gradient(135deg, #87CEEB 0%, #90EE90 100%)",
            text="#333333",
        ),
        particles=ThemeParticles(
            shapes=["circle", "flower"],
            colors=["#8B4513", "#228B22", "#87CEEB", "#FFFFFF"], count=30, speed="slow",
        ),
        sounds=ThemeSounds(theme="default", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Will you see your shadow? "),
        decorations=ThemeDecorations(icon_emoji="🦫"),
    ),
    "super-bowl": HolidayTheme(
        colors=ThemeColors(
            primary="#013369", secondary="#D50A0A", accent="#FFD700",
            background="linear-gradient(135deg, #1a472a 0%, #013369 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["football", "star"],
            colors=["#013369", "#D50A0A", "#FFD700", "#8B4513"], count=60, speed="fast",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Game Day! "),
        decorations=ThemeDecorations(icon_emoji="🏈"),
    ),
    "valentines-day": HolidayTheme(
        colors=ThemeColors(
            primary="#FF69B4", secondary="#FF0000", accent="#FFB6C1",
            background="linear-gradient(135deg, #FFE4E1 0%, #FFB6C1 50%, #FF69B4 100%)",
            text="#8B0000", glow="#FF69B4",
        ),
        particles=ThemeParticles(
            shapes=["heart", "flower", "circle"],
            colors=["#FF69B4", "#FF0000", "#FFB6C1", "#FFFFFF", "#B8860B"], count=80, speed="slow",
        ),
        sounds=ThemeSounds(theme="romantic", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Spread the love! ", welcome_override="We love having you, {name}!"),
        decorations=ThemeDecorations(icon_emoji="💕", overlay="hearts"),
    ),
    "presidents-day": HolidayTheme(
        colors=ThemeColors(
            primary="#002868", secondary="#BF0A30", accent="#FFFFFF",
            background="linear-gradient(135deg, #002868 0%, #FFFFFF 50%, #BF0A30 100%)",
            text="#002868",
        ),
        particles=ThemeParticles(shapes=["star", "flag"], colors=PATRIOTIC, count=50, speed="normal"),
        sounds=ThemeSounds(theme="patriotic", default_mode="layer"),
        quotes=ThemeQuotes(category_filter=["Leadership"]),
        decorations=ThemeDecorations(icon_emoji="🦅"),
    ),
    # March
    "purim": HolidayTheme(
        colors=ThemeColors(
            primary="#9400D3", secondary="#FFD700", accent="#00CED1",
            background="linear-gradient(135deg, #9400D3 0%, #FFD700 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle", "triangle"],
            colors=["#9400D3", "#FFD700", "#00CED1", "#FF69B4"], count=70, speed="fast",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Chag Purim! "),
        decorations=ThemeDecorations(icon_emoji="🎭"),
    ),
    "holi": HolidayTheme(
        colors=ThemeColors(
            primary="#FF1493", secondary="#00FF00", accent="#FFD700",
            background=(
                "linear-gradient(135deg, #FF6B6B 0%, #4ECDC4 25%, #FFE66D 50%, "
                "#FF6B6B 75%, #95E1D3 100%)"
            ),
            text="#333333",
        ),
        particles=ThemeParticles(
            shapes=["circle", "star"],
            colors=["#FF1493", "#00FF00", "#FFD700", "#FF4500", "#9400D3", "#00CED1", "#FF69B4"],
            count=120, speed="fast",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="replace"),
        quotes=ThemeQuotes(prefix="Festival of Colors! ", welcome_override="Color your day, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🎨", overlay="colors"),
    ),
    "st-patricks-day": HolidayTheme(
        colors=ThemeColors(
            primary="#228B22", secondary="#FFD700", accent="#FFFFFF",
            background="linear-gradient(135deg, #228B22 0%, #32CD32 50%, #FFD700 100%)",
            text="#FFFFFF", glow="#228B22",
        ),
        particles=ThemeParticles(
            shapes=["shamrock", "coin", "rainbow"],
            colors=["#228B22", "#32CD32", "#FFD700", "#FFFFFF"], count=70, speed="normal",
        ),
        sounds=ThemeSounds(theme="celtic", default_mode="layer"),
        quotes=ThemeQuotes(prefix="May luck be with you! "),
        decorations=ThemeDecorations(icon_emoji="☘️", overlay="shamrocks"),
    ),
    # March/April
    "passover": HolidayTheme(
        colors=ThemeColors(
            primary="#4169E1", secondary="#FFFFFF", accent="#FFD700",
            background="linear-gradient(135deg, #4169E1 0%, #FFFFFF 50%, #E6E6FA 100%)",
            text="#4169E1",
        ),
        particles=ThemeParticles(
            shapes=["star", "flower"],
            colors=["#4169E1", "#FFFFFF", "#FFD700", "#9400D3"], count=50, speed="slow",
        ),
        sounds=ThemeSounds(theme="peaceful", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Chag Pesach Sameach! "),
        decorations=ThemeDecorations(icon_emoji="✡️", progression_emoji=NUMBERED_DAYS[:8]),
    ),
    "good-friday": HolidayTheme(
        colors=ThemeColors(
            primary="#4B0082", secondary="#8B4513", accent="#FFFFFF",
            background="linear-gradient(135deg, #4B0082 0%, #2F1B41 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["dove", "flower"], colors=["#FFFFFF", "#4B0082", "#FFD700"], count=30, speed="slow",
        ),
        sounds=ThemeSounds(theme="reverent", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Peace be with you. "),
        decorations=ThemeDecorations(icon_emoji="✝️"),
        respectful=True,
    ),
    "easter": HolidayTheme(
        colors=ThemeColors(
            primary="#FF69B4", secondary="#FFFF00", accent="#87CEEB",
            background=(
                "linear-gradient(135deg, #E6E6FA 0%, #FFB6C1 25%, #FFFACD 50%, "
                "#98FB98 75%, #87CEEB 100%)"
            ),
            text="#4B0082",
        ),
        particles=ThemeParticles(
            shapes=["egg", "flower", "butterfly"],
            colors=["#FF69B4", "#FFFF00", "#87CEEB", "#98FB98", "#E6E6FA", "#FFA500"],
            count=80, speed="normal",
        ),
        sounds=ThemeSounds(theme="peaceful", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Spring into action! ", welcome_override="Hoppy to see you, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🐰", overlay="eggs"),
    ),
    "eid-al-fitr": HolidayTheme(
        colors=ThemeColors(
            primary="#228B22", secondary="#FFD700", accent="#FFFFFF",
            background="linear-gradient(135deg, #228B22 0%, #FFD700 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle", "firework"],
            colors=["#228B22", "#FFD700", "#FFFFFF", "#C0C0C0"], count=70, speed="normal",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Eid Mubarak! ", welcome_override="Blessed Eid, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🌙", progression_emoji=NUMBERED_DAYS[:3]),
    ),
    # April
    "earth-day": HolidayTheme(
        colors=ThemeColors(
            primary="#228B22", secondary="#4169E1", accent="#8B4513",
            background="linear-gradient(135deg, #87CEEB 0%, #90EE90 50%, #228B22 100%)",
            text="#006400",
        ),
        particles=ThemeParticles(
            shapes=["leaf", "flower", "butterfly"],
            colors=["#228B22", "#4169E1", "#8B4513", "#90EE90", "#87CEEB"], count=60, speed="slow",
        ),
        sounds=ThemeSounds(theme="peaceful", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Love our planet! ", category_filter=["Innovation"]),
        decorations=ThemeDecorations(icon_emoji="🌍", overlay="leaves"),
    ),
    # May
    "cinco-de-mayo": HolidayTheme(
        colors=ThemeColors(
            primary="#006847", secondary="#CE1126", accent="#FFFFFF",
            background="linear-gradient(135deg, #006847 0%, #FFFFFF 50%, #CE1126 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["star", "flower", "circle"],
            colors=["#006847", "#CE1126", "#FFD700", "#FF69B4", "#00CED1"], count=80, speed="fast",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="replace"),
        quotes=ThemeQuotes(prefix="¡Viva la fiesta! "),
        decorations=ThemeDecorations(icon_emoji="🎉"),
    ),
    "mothers-day": HolidayTheme(
        colors=ThemeColors(
            primary="#FF69B4", secondary="#E6E6FA", accent="#98FB98",
            background="linear-gradient(135deg, #FFE4E1 0%, #E6E6FA 50%, #FFB6C1 100%)",
            text="#8B008B",
        ),
        particles=ThemeParticles(
            shapes=["flower", "heart", "butterfly"],
            colors=["#FF69B4", "#E6E6FA", "#98FB98", "#FFB6C1", "#FFFFFF"], count=70, speed="slow",
        ),
        sounds=ThemeSounds(theme="romantic", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Celebrating all moms! ", category_filter=["Motivation", "Success"]),
        decorations=ThemeDecorations(icon_emoji="💐", overlay="flowers"),
    ),
    "memorial-day": HolidayTheme(
        colors=ThemeColors(
            primary="#002868", secondary="#BF0A30", accent="#FFFFFF",
            background="linear-gradient(135deg, #002868 0%, #1a1a2e 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(shapes=["star", "flag", "flower"], colors=PATRIOTIC, count=40, speed="slow"),
        sounds=ThemeSounds(theme="reverent", default_mode="layer"),
        quotes=ThemeQuotes(prefix="We remember. ", category_filter=["Leadership", "Persistence"]),
        decorations=ThemeDecorations(icon_emoji="🇺🇸"),
        respectful=True,
    ),
    # June
    "eid-al-adha": HolidayTheme(
        colors=ThemeColors(
            primary="#228B22", secondary="#FFD700", accent="#FFFFFF",
            background="linear-gradient(135deg, #228B22 0%, #006400 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle"],
            colors=["#228B22", "#FFD700", "#FFFFFF", "#C0C0C0"], count=60, speed="normal",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Eid Mubarak! "),
        decorations=ThemeDecorations(icon_emoji="🕌", progression_emoji=NUMBERED_DAYS[:4]),
    ),
    "fathers-day": HolidayTheme(
        colors=ThemeColors(
            primary="#4169E1", secondary="#228B22", accent="#8B4513",
            background="linear-gradient(135deg, #4169E1 0%, #2F4F4F 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle"],
            colors=["#4169E1", "#228B22", "#FFD700", "#8B4513"], count=50, speed="normal",
        ),
        sounds=ThemeSounds(theme="default", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Celebrating all dads! ", category_filter=["Leadership", "Motivation"]),
        decorations=ThemeDecorations(icon_emoji="👔"),
    ),
    "juneteenth": HolidayTheme(
        colors=ThemeColors(
            primary="#BF0A30", secondary="#000000", accent="#228B22",
            background="linear-gradient(135deg, #BF0A30 0%, #000000 50%, #228B22 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["star", "firework"],
            colors=["#BF0A30", "#228B22", "#FFD700", "#FFFFFF"], count=80, speed="normal",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Freedom Day! "),
        decorations=ThemeDecorations(icon_emoji="✊🏿"),
    ),
    # July
    "independence-day": HolidayTheme(
        colors=ThemeColors(
            primary="#BF0A30", secondary="#002868", accent="#FFFFFF",
            background="linear-gradient(135deg, #002868 0%, #1a1a2e 50%, #BF0A30 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["star", "firework", "flag"],
            colors=["#BF0A30", "#002868", "#FFFFFF", "#FFD700"], count=100, speed="fast",
        ),
        sounds=ThemeSounds(theme="patriotic", default_mode="replace"),
        quotes=ThemeQuotes(prefix="Happy 4th! ", welcome_override="Land of the free, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🎆", overlay="fireworks"),
    ),
    "bastille-day": HolidayTheme(
        colors=ThemeColors(
            primary="#002395", secondary="#ED2939", accent="#FFFFFF",
            background="linear-gradient(135deg, #002395 0%, #FFFFFF 50%, #ED2939 100%)",
            text="#002395",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle"], colors=["#002395", "#ED2939", "#FFFFFF"], count=70, speed="normal",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Vive la France! "),
        decorations=ThemeDecorations(icon_emoji="🇫🇷"),
    ),
    # September
    "labor-day": HolidayTheme(
        colors=ThemeColors(
            primary="#1E90FF", secondary="#BF0A30", accent="#FFD700",
            background="linear-gradient(135deg, #1E90FF 0%, #2F4F4F 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle"],
            colors=["#1E90FF", "#BF0A30", "#FFD700", "#FFFFFF"], count=50, speed="normal",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Hard work pays off! ", category_filter=["Motivation", "Success"]),
        decorations=ThemeDecorations(icon_emoji="⚒️"),
    ),
    "rosh-hashanah": HolidayTheme(
        colors=ThemeColors(
            primary="#FFFFFF", secondary="#FFD700", accent="#4169E1",
            background="linear-gradient(135deg, #FFFFFF 0%, #FFFACD 50%, #FFD700 100%)",
            text="#4169E1",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle"],
            colors=["#FFFFFF", "#FFD700", "#4169E1", "#FFA500"], count=50, speed="slow",
        ),
        sounds=ThemeSounds(theme="peaceful", default_mode="layer"),
        quotes=ThemeQuotes(prefix="L'Shanah Tovah! ", welcome_override="Sweet new year, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🍎", progression_emoji=NUMBERED_DAYS[:2]),
    ),
    "yom-kippur": HolidayTheme(
        colors=ThemeColors(
            primary="#FFFFFF", secondary="#C0C0C0", accent="#FFD700",
            background="linear-gradient(135deg, #FFFFFF 0%, #E8E8E8 100%)",
            text="#333333",
        ),
        particles=ThemeParticles(
            shapes=["dove", "star"], colors=["#FFFFFF", "#C0C0C0", "#E8E8E8"], count=20, speed="slow",
        ),
        sounds=ThemeSounds(theme="reverent", default_mode="layer"),
        quotes=ThemeQuotes(prefix="G'mar Chatimah Tovah. "),
        decorations=ThemeDecorations(icon_emoji="🕊️"),
        respectful=True,
    ),
    # October
    "indigenous-peoples-day": HolidayTheme(
        colors=ThemeColors(
            primary="#CD853F", secondary="#40E0D0", accent="#9ACD32",
            background="linear-gradient(135deg, #CD853F 0%, #DEB887 50%, #40E0D0 100%)",
            text="#8B4513",
        ),
        particles=ThemeParticles(
            shapes=["leaf", "flower"],
            colors=["#CD853F", "#40E0D0", "#9ACD32", "#FF7F50"], count=50, speed="slow",
        ),
        sounds=ThemeSounds(theme="drumbeat", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Honoring all cultures. "),
        decorations=ThemeDecorations(icon_emoji="🪶"),
        respectful=True,
    ),
    "diwali": HolidayTheme(
        colors=ThemeColors(
            primary="#FFD700", secondary="#FF4500", accent="#9400D3",
            background="linear-gradient(135deg, #FFD700 0%, #FF4500 50%, #9400D3 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["diya", "firework", "star"],
            colors=["#FFD700", "#FF4500", "#9400D3", "#FF69B4", "#00CED1"], count=100, speed="fast",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="replace"),
        quotes=ThemeQuotes(prefix="Happy Diwali! ", welcome_override="May light guide you, {name}!"),
        decorations=ThemeDecorations(
            icon_emoji="🪔", overlay="diyas",
            progression_emoji=["🪔" * n for n in range(1, 6)],
        ),
    ),
    "halloween": HolidayTheme(
        colors=ThemeColors(
            primary="#FF6600", secondary="#000000", accent="#9400D3",
            background="linear-gradient(135deg, #000000 0%, #1a0a2e 50%, #2d1b4e 100%)",
            text="#FF6600", glow="#9400D3",
        ),
        particles=ThemeParticles(
            shapes=["pumpkin", "ghost", "bat", "star"],
            colors=["#FF6600", "#9400D3", "#00FF00", "#FFFFFF"], count=80, speed="normal",
        ),
        sounds=ThemeSounds(theme="spooky", default_mode="replace"),
        quotes=ThemeQuotes(prefix="Spooky season! ", welcome_override="Boo-tiful to see you, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🎃", overlay="spiderwebs"),
    ),
    # November
    "day-of-the-dead": HolidayTheme(
        colors=ThemeColors(
            primary="#FF6600", secondary="#000000", accent="#FF1493",
            background="linear-gradient(135deg, #000000 0%, #2d0a3e 50%, #FF6600 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["skull", "marigold", "flower"],
            colors=["#FF6600", "#FF1493", "#40E0D0", "#9400D3", "#FFFFFF"], count=70, speed="slow",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Celebrating life. "),
        decorations=ThemeDecorations(icon_emoji="💀", overlay="marigolds", progression_emoji=["💀", "💀💀"]),
    ),
    "veterans-day": HolidayTheme(
        colors=ThemeColors(
            primary="#002868", secondary="#BF0A30", accent="#FFFFFF",
            background="linear-gradient(135deg, #002868 0%, #1a1a2e 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(shapes=["star", "flag", "flower"], colors=PATRIOTIC, count=40, speed="slow"),
        sounds=ThemeSounds(theme="reverent", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Thank you for your service. "),
        decorations=ThemeDecorations(icon_emoji="🎖️"),
        respectful=True,
    ),
    "thanksgiving": HolidayTheme(
        colors=ThemeColors(
            primary="#FF6600", secondary="#8B4513", accent="#FFD700",
            background="linear-gradient(135deg, #8B4513 0%, #CD853F 50%, #FF6600 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["leaf", "turkey", "pumpkin"],
            colors=["#FF6600", "#8B4513", "#FFD700", "#8B0000", "#228B22"], count=70, speed="slow",
        ),
        sounds=ThemeSounds(theme="peaceful", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Grateful for you! ", welcome_override="Thankful for you, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🦃", overlay="leaves"),
    ),
    # December
    "hanukkah": HolidayTheme(
        colors=ThemeColors(
            primary="#4169E1", secondary="#FFFFFF", accent="#C0C0C0",
            background="linear-gradient(135deg, #4169E1 0%, #1a1a4e 50%, #FFFFFF 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["dreidel", "menorah", "star", "coin"],
            colors=["#4169E1", "#FFFFFF", "#C0C0C0", "#FFD700"], count=70, speed="normal",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Chag Sameach! ", welcome_override="Festival of Lights, {name}!"),
        decorations=ThemeDecorations(
            icon_emoji="🕎",
            progression_emoji=["🕯️" * n for n in range(1, 9)],  # Candles lit each night
        ),
    ),
    "christmas-eve": HolidayTheme(
        colors=ThemeColors(
            primary="#228B22", secondary="#BF0A30", accent="#FFD700",
            background="linear-gradient(135deg, #0a2e1a 0%, #1a3a2a 50%, #0a2e1a 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["snowflake", "star", "ornament"],
            colors=["#228B22", "#BF0A30", "#FFD700", "#FFFFFF", "#C0C0C0"], count=60, speed="slow",
        ),
        sounds=ThemeSounds(theme="jingle", default_mode="layer"),
        quotes=ThemeQuotes(prefix="'Twas the night before... "),
        decorations=ThemeDecorations(icon_emoji="🌟", overlay="snow"),
    ),
    "christmas": HolidayTheme(
        colors=ThemeColors(
            primary="#BF0A30", secondary="#228B22", accent="#FFD700",
            background="linear-gradient(135deg, #0a2e1a 0%, #1a3a2a 50%, #2d0a1a 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["snowflake", "ornament", "candy-cane", "gift", "star"],
            colors=["#BF0A30", "#228B22", "#FFD700", "#FFFFFF", "#C0C0C0"], count=100, speed="normal",
        ),
        sounds=ThemeSounds(theme="jingle", default_mode="replace"),
        quotes=ThemeQuotes(prefix="Merry Christmas! ", welcome_override="Ho ho ho, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🎄", overlay="snow"),
    ),
    "kwanzaa": HolidayTheme(
        colors=ThemeColors(
            primary="#BF0A30", secondary="#000000", accent="#228B22",
            background="linear-gradient(135deg, #BF0A30 0%, #000000 50%, #228B22 100%)",
            text="#FFFFFF",
        ),
        particles=ThemeParticles(
            shapes=["star", "circle"],
            colors=["#BF0A30", "#000000", "#228B22", "#FFD700"], count=60, speed="slow",
        ),
        sounds=ThemeSounds(theme="drumbeat", default_mode="layer"),
        quotes=ThemeQuotes(prefix="Habari Gani! "),
        decorations=ThemeDecorations(
            icon_emoji="🕯️",
            # The seven principles, one per day
            progression_emoji=["Umoja", "Kujichagulia", "Ujima", "Ujamaa", "Nia", "Kuumba", "Imani"],
        ),
    ),
    "new-years-eve": HolidayTheme(
        colors=ThemeColors(
            primary="#FFD700", secondary="#C0C0C0", accent="#000000",
            background="linear-gradient(135deg, #1a1a2e 0%, #2d2d4e 50%, #0a0a1e 100%)",
            text="#FFFFFF", glow="#FFD700",
        ),
        particles=ThemeParticles(
            shapes=["star", "firework", "circle"],
            colors=["#FFD700", "#C0C0C0", "#FFFFFF", "#FF69B4"], count=100, speed="fast",
        ),
        sounds=ThemeSounds(theme="festive", default_mode="replace"),
        quotes=ThemeQuotes(prefix="Ring in the new year! ", welcome_override="Cheers to you, {name}!"),
        decorations=ThemeDecorations(icon_emoji="🥂", overlay="fireworks"),
    ),
}

_DEFAULT_THEME = HolidayTheme(
    colors=ThemeColors(
        primary="#ffc421", secondary="#ff9d00", accent="#2153ff",
        background="linear-gradient(135deg, #fff9e9 0%, #fffdf5 100%)",
        text="#000824",
    ),
    particles=ThemeParticles(
        shapes=["circle", "square", "star"],
        colors=["#ffc421", "#ff9d00", "#ffaa00", "#2153ff"], count=80,
    ),
)


def get_holiday_theme(holiday_id: str) -> Optional[HolidayTheme]:
    return HOLIDAY_THEMES.get(holiday_id)


def get_default_theme() -> HolidayTheme:
    """Theme for non-holiday days and for holidays without an entry."""
    return _DEFAULT_THEME


def apply_quote_transform(text: str, theme: HolidayTheme) -> str:
    """
    Dress a quote for the active theme.

    A welcome_override replaces the text outright. Otherwise the prefix and
    suffix wrap it, either of which may be absent.
    """
    if theme.quotes.welcome_override:
        return theme.quotes.welcome_override
    return f"{theme.quotes.prefix or ''}{text}{theme.quotes.suffix or ''}"


def get_welcome_message(name: str, theme: HolidayTheme) -> str:
    template = theme.quotes.welcome_override or DEFAULT_WELCOME
    return template.replace("{name}", name)


def get_progression_emoji(theme: HolidayTheme, day_of_holiday: int) -> Optional[str]:
    """Glyph for 1-indexed day_of_holiday, or None without a sequence or out of range."""
    emojis = theme.decorations.progression_emoji
    if not emojis or not 1 <= day_of_holiday <= len(emojis):
        return None
    return emojis[day_of_holiday - 1]
