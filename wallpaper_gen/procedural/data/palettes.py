"""
Named theme catalog. Seven shape colors, a background and an accent per theme.
Keys are part of share links and stored settings: never rename or remove one.
"""
from ..schema import PaletteDefinition


def _theme(name: str, display_name: str, background: str, colors: list[str], accent: str | None = None) -> PaletteDefinition:
    return PaletteDefinition(name, display_name, tuple(colors), background, accent)


PALETTES: dict[str, PaletteDefinition] = {
    p.name: p
    for p in (
        _theme(
            "catppuccinMocha", "Catppuccin Mocha", "#1e1e2e",
            ["#f38ba8", "#fab387", "#f9e2af", "#a6e3a1", "#89dceb", "#cba6f7", "#f5c2e7"],
            "#cdd6f4",
        ),
        _theme(
            "catppuccinLatte", "Catppuccin Latte", "#eff1f5",
            ["#d20f39", "#fe640b", "#df8e1d", "#40a02b", "#04a5e5", "#8839ef", "#ea76cb"],
            "#4c4f69",
        ),
        _theme(
            "catppuccinFrappe", "Catppuccin Frappé", "#303446",
            ["#e78284", "#ef9f76", "#e5c890", "#a6d189", "#85c1dc", "#ca9ee6", "#f4b8e4"],
            "#c6d0f5",
        ),
        _theme(
            "catppuccinMacchiato", "Catppuccin Macchiato", "#24273a",
            ["#ed8796", "#f5a97f", "#eed49f", "#a6da95", "#7dc4e4", "#c6a0f6", "#f5bde6"],
            "#cad3f5",
        ),
        _theme(
            "dracula", "Dracula", "#282a36",
            ["#ff5555", "#ffb86c", "#f1fa8c", "#50fa7b", "#8be9fd", "#bd93f9", "#ff79c6"],
            "#f8f8f2",
        ),
        _theme(
            "draculaPro", "Dracula Pro", "#22212c",
            ["#ff9580", "#ffca80", "#ffff80", "#8aff80", "#80ffea", "#9580ff", "#ff80bf"],
            "#f8f8f2",
        ),
        _theme(
            "nord", "Nord", "#2e3440",
            ["#bf616a", "#d08770", "#ebcb8b", "#a3be8c", "#88c0d0", "#b48ead", "#81a1c1"],
            "#eceff4",
        ),
        _theme(
            "gruvboxDark", "Gruvbox Dark", "#282828",
            ["#cc241d", "#d65d0e", "#d79921", "#98971a", "#689d6a", "#458588", "#b16286"],
            "#ebdbb2",
        ),
        _theme(
            "gruvboxLight", "Gruvbox Light", "#fbf1c7",
            ["#9d0006", "#af3a03", "#b57614", "#79740e", "#427b58", "#076678", "#8f3f71"],
            "#3c3836",
        ),
        _theme(
            "tokyoNight", "Tokyo Night", "#1a1b26",
            ["#f7768e", "#ff9e64", "#e0af68", "#9ece6a", "#73daca", "#7aa2f7", "#bb9af7"],
            "#c0caf5",
        ),
        _theme(
            "oneDark", "One Dark", "#282c34",
            ["#e06c75", "#d19a66", "#e5c07b", "#98c379", "#56b6c2", "#61afef", "#c678dd"],
            "#abb2bf",
        ),
        _theme(
            "solarizedDark", "Solarized Dark", "#002b36",
            ["#dc322f", "#cb4b16", "#b58900", "#859900", "#2aa198", "#268bd2", "#d33682"],
            "#839496",
        ),
        _theme(
            "solarizedLight", "Solarized Light", "#fdf6e3",
            ["#dc322f", "#cb4b16", "#b58900", "#859900", "#2aa198", "#268bd2", "#d33682"],
            "#657b83",
        ),
        _theme(
            "rosePine", "Rosé Pine", "#191724",
            ["#eb6f92", "#f6c177", "#ebbcba", "#9ccfd8", "#c4a7e7", "#31748f", "#e0def4"],
            "#e0def4",
        ),
        _theme(
            "rosePineMoon", "Rosé Pine Moon", "#232136",
            ["#eb6f92", "#f6c177", "#ea9a97", "#9ccfd8", "#c4a7e7", "#3e8fb0", "#e0def4"],
            "#e0def4",
        ),
        _theme(
            "rosePineDawn", "Rosé Pine Dawn", "#faf4ed",
            ["#b4637a", "#ea9d34", "#d7827e", "#56949f", "#907aa9", "#286983", "#575279"],
            "#575279",
        ),
        _theme(
            "sunset", "Sunset", "#ff8c42",
            ["#ff6b35", "#f7931e", "#fdc830", "#37cfdc", "#4e9fe5", "#b8d4e3", "#ffffff"],
            "#ffffff",
        ),
        _theme(
            "ocean", "Ocean", "#0a1628",
            ["#667eea", "#764ba2", "#f093fb", "#4facfe", "#00f2fe", "#43e97b", "#38f9d7"],
            "#ffffff",
        ),
        _theme(
            "forest", "Forest", "#1a2f1a",
            ["#2d5a27", "#4a7c47", "#6b9f68", "#8bc389", "#a8d8a8", "#c5ebc5", "#e2f5e2"],
            "#e2f5e2",
        ),
        _theme(
            "candy", "Candy", "#ffeef8",
            ["#ff6b9d", "#ff85a1", "#ff9fb4", "#ffb8c6", "#ffd1d9", "#ffeaec", "#fff5f7"],
            "#ff6b9d",
        ),
        _theme(
            "midnight", "Midnight", "#0d0d1a",
            ["#1a1a3e", "#2d2d5a", "#404077", "#535394", "#6666b1", "#7979ce", "#8c8ceb"],
            "#8c8ceb",
        ),
    )
}
