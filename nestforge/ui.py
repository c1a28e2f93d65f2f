"""User-facing message strings, emoji and output prefixes."""

from __future__ import annotations

ERROR_PREFIX = "[bold black on rgb(210,0,75)] Error [/bold black on rgb(210,0,75)]"
INFO_PREFIX = "[bold black on rgb(60,190,100)] Info [/bold black on rgb(60,190,100)]"


class EMOJIS:
    COFFEE = "☕"
    HEART = "❤️"
    POINT_RIGHT = "\U0001f449"
    PRAY = "\U0001f64f"
    ROCKET = "\U0001f680"
    SCREAM = "\U0001f631"
    WINE = "\U0001f377"
    ZAP = "⚡"


class MESSAGES:
    PROJECT_INFORMATION_START = f"{EMOJIS.ZAP}  We will scaffold your app in a few seconds.."
    PROJECT_NAME_QUESTION = "What name would you like to use for the new project?"
    PACKAGE_MANAGER_QUESTION = f"Which package manager would you {EMOJIS.HEART}  to use?"
    PACKAGE_MANAGER_INSTALLATION_IN_PROGRESS = f"Installation in progress... {EMOJIS.COFFEE}"
    GET_STARTED_INFORMATION = f"{EMOJIS.POINT_RIGHT}  Get started with the following commands:"
    GIT_INITIALIZATION_ERROR = "Git repository has not been initialized"
    DRY_RUN_MODE = "Command has been executed in dry run mode, nothing changed!"
    GENERATION_FAILED = "Failed to execute command"
    COMPLETION_THANKS = f"Thanks for installing Nest {EMOJIS.PRAY}"
    COMPLETION_DONATE_LINE_1 = "Please consider donating to our open collective"
    COMPLETION_DONATE_LINE_2 = "to help us maintain this package."
    DONATE_URL = "https://opencollective.com/nest"

    @staticmethod
    def package_manager_installation_succeed(name: str) -> str:
        return f"{EMOJIS.ROCKET}  Successfully created project {name}"

    @staticmethod
    def package_manager_installation_failed(command: str) -> str:
        return (
            f"{EMOJIS.SCREAM}  Packages installation failed!\n"
            "In order to finish the installation, run the following command "
            f"manually: {command}"
        )

    @staticmethod
    def change_dir_command(name: str) -> str:
        return f"$ cd {name}"

    @staticmethod
    def start_command(package_manager: str) -> str:
        return f"$ {package_manager} run start"
