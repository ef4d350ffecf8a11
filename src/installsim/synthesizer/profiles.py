"""Behavior profiles for fake binaries and the built-in catalogs."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BinaryProfile:
    """Declarative description of how a fake binary behaves.

    Attributes:
        name: Executable name written to the binaries directory
        version: Version shown in the no-argument banner
        help_text: Printed for --help / -h unless a flag entry overrides it
        flags: First argument -> output
        outputs: Exact argument string ("$*") -> output; "" is the no-argument output
        exit_codes: Exact argument string -> forced exit code, checked before anything else
    """

    name: str
    version: str
    help_text: str = ""
    flags: dict[str, str] = field(default_factory=dict)
    outputs: dict[str, str] = field(default_factory=dict)
    exit_codes: dict[str, int] = field(default_factory=dict)


COMMON_PROFILES: tuple[BinaryProfile, ...] = (
    BinaryProfile(
        name="vim",
        version="8.2.4919",
        help_text="Vi IMproved - enhanced vi editor",
        flags={"--version": "VIM - Vi IMproved 8.2 (2019 Dec 12, compiled Apr 08 2024 01:00:00)"},
    ),
    BinaryProfile(
        name="nvim",
        version="0.9.5",
        help_text="Neovim - hyperextensible Vim-based text editor",
        flags={"--version": "NVIM v0.9.5"},
    ),
    BinaryProfile(
        name="btop",
        version="1.2.13",
        help_text="Resource monitor that shows usage and stats",
        flags={"--version": "btop version: 1.2.13"},
    ),
    BinaryProfile(
        name="git",
        version="2.34.1",
        help_text="Fast, scalable, distributed revision control system",
        flags={"--version": "git version 2.34.1"},
        outputs={
            "status": "On branch main\nnothing to commit, working tree clean",
            "log --oneline -5": "abcd123 Initial commit",
        },
    ),
    BinaryProfile(
        name="curl",
        version="7.81.0",
        help_text="Command line tool for transferring data with URL syntax",
        flags={"--version": "curl 7.81.0 (x86_64-pc-linux-gnu)"},
    ),
    BinaryProfile(
        name="wget",
        version="1.21.2",
        help_text="Tool for retrieving files using HTTP, HTTPS, and FTP",
        flags={"--version": "GNU Wget 1.21.2 built on linux-gnu"},
    ),
    BinaryProfile(
        name="fish",
        version="3.3.1",
        help_text="Fish - the friendly interactive shell",
        flags={"--version": "fish, version 3.3.1"},
    ),
    BinaryProfile(
        name="lazygit",
        version="0.40.2",
        help_text="Simple terminal UI for git commands",
        flags={
            "--version": (
                "commit=unknown, build date=unknown, build source=unknown, version=0.40.2"
            )
        },
    ),
    BinaryProfile(
        name="zellij",
        version="0.39.2",
        help_text="Terminal multiplexer with batteries included",
        flags={"--version": "zellij 0.39.2"},
    ),
    BinaryProfile(
        name="fastfetch",
        version="2.8.10",
        help_text="System information fetch tool",
        flags={"--version": "fastfetch 2.8.10"},
        outputs={"": "Fake system information display"},
    ),
    BinaryProfile(
        name="gh",
        version="2.40.1",
        help_text="GitHub CLI - GitHub on the command line",
        flags={"--version": "gh version 2.40.1 (2023-12-13)"},
        outputs={"auth status": "Logged in to github.com as testuser"},
        exit_codes={"auth status --hostname example.invalid": 1},
    ),
    BinaryProfile(
        name="flatpak",
        version="1.12.7",
        help_text="Application deployment framework for desktop apps",
        flags={"--version": "Flatpak 1.12.7"},
        outputs={"list": "Name                    Application ID          Version    Branch"},
    ),
    BinaryProfile(
        name="snap",
        version="2.58",
        help_text="Tool to interact with snaps",
        flags={"--version": "snap 2.58"},
        outputs={"list": "Name     Version   Rev   Tracking      Publisher"},
    ),
)

APPLICATION_PROFILES: tuple[BinaryProfile, ...] = (
    BinaryProfile(
        name="code",
        version="1.85.1",
        help_text="Visual Studio Code - Code editing redefined",
        flags={
            "--version": (
                "1.85.1\ncommit: 0ee08df0cf4527e40edc9aa28f4b5bd38bbff2b2\n"
                "Electron: 25.9.7\nElectronBuildId: 25551756"
            )
        },
    ),
    BinaryProfile(
        name="cursor",
        version="0.20.2",
        help_text="Cursor - AI-powered code editor",
        flags={"--version": "Cursor 0.20.2"},
    ),
    BinaryProfile(
        name="zed",
        version="0.118.0",
        help_text="Zed - High-performance code editor",
        flags={"--version": "zed 0.118.0"},
    ),
    BinaryProfile(
        name="google-chrome",
        version="120.0.6099.129",
        help_text="Google Chrome web browser",
        flags={"--version": "Google Chrome 120.0.6099.129"},
    ),
    BinaryProfile(
        name="flameshot",
        version="12.1.0",
        help_text="Powerful screenshot tool",
        flags={"--version": "Flameshot v12.1.0"},
    ),
    BinaryProfile(
        name="typora",
        version="1.7.6",
        help_text="Markdown editor and reader",
        flags={"--version": "Typora version 1.7.6"},
    ),
    BinaryProfile(
        name="xournalpp",
        version="1.1.1",
        help_text="Handwriting notetaking software with PDF annotation",
        flags={"--version": "Xournal++ 1.1.1"},
    ),
)

DESKTOP_ENTRIES: dict[str, str] = {
    "code.desktop": """[Desktop Entry]
Version=1.0
Type=Application
Name=Visual Studio Code
GenericName=Text Editor
Comment=Code Editing. Redefined.
Exec=/usr/bin/code --unity-launch %F
Icon=code
Terminal=false
MimeType=text/plain;inode/directory;
Categories=TextEditor;Development;IDE;
""",
    "google-chrome.desktop": """[Desktop Entry]
Version=1.0
Name=Google Chrome
GenericName=Web Browser
Comment=Access the Internet
Exec=/usr/bin/google-chrome-stable %U
Terminal=false
Icon=google-chrome
Type=Application
Categories=Network;WebBrowser;
MimeType=application/pdf;application/xhtml+xml;application/xml;image/gif;image/jpeg;image/png;image/webp;text/html;text/xml;x-scheme-handler/http;x-scheme-handler/https;
""",
    "nvim.desktop": """[Desktop Entry]
Name=Neovim
GenericName=Text Editor
Comment=Edit text files
TryExec=nvim
Exec=nvim %F
Terminal=true
Type=Application
Keywords=Text;editor;
Icon=nvim
Categories=Utility;TextEditor;
MimeType=text/plain;text/x-python;text/x-shellscript;
""",
    "flameshot.desktop": """[Desktop Entry]
Name=Flameshot
Comment=Powerful yet simple-to-use screenshot software
GenericName=Screenshot software
Exec=flameshot
Icon=flameshot
Terminal=false
Type=Application
Categories=Graphics;Photography;
MimeType=image/png;
""",
}
