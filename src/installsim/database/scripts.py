"""Built-in registry of custom install scripts."""

from installsim.database.types import ScriptInfo

CUSTOM_SCRIPTS: dict[str, ScriptInfo] = {
    "fastfetch-install": ScriptInfo(
        name="fastfetch",
        description="System information display tool installation",
        commands=(
            "sudo add-apt-repository -y ppa:zhangsongcui3371/fastfetch",
            "sudo apt update -y",
            "sudo apt install -y fastfetch",
        ),
        pre_reqs=("add-apt-repository", "apt"),
    ),
    "typora-install": ScriptInfo(
        name="typora",
        description="Markdown editor installation",
        commands=(
            "wget -qO - https://typora.io/linux/public-key.asc"
            " | sudo tee /etc/apt/trusted.gpg.d/typora.asc",
            "sudo add-apt-repository -y 'deb https://typora.io/linux ./'",
            "sudo apt update -y",
            "sudo apt install -y typora",
        ),
        pre_reqs=("wget", "apt"),
        post_install=("mkdir -p ~/.config/Typora/themes",),
    ),
    "mise-install": ScriptInfo(
        name="mise",
        description="Fast polyglot tool version manager installation",
        commands=(
            "curl https://mise.jdx.dev/install.sh | sh",
            "echo '~/.local/bin/mise activate fish | source' >> ~/.config/fish/config.fish",
        ),
        pre_reqs=("curl",),
        post_install=(
            "mkdir -p ~/.local/share/mise",
            "mise use --global node@lts",
        ),
        variables={"MISE_DATA_DIR": "~/.local/share/mise"},
    ),
}
