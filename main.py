# Main.py
""""" Entry point for the console calculator.

   Responsibilities:
   - Verify required files exist in development mode
   - Load configuration and run the read-evaluate-print loop

   A failed evaluation keeps the previous display value.
"""""
import sys
from pathlib import Path
from calculator import config_manager as config_manager, MathEngine as MathEngine, error as E


PROJECT_ROOT = Path(__file__).resolve().parent

EXIT_COMMANDS = ("exit", "quit")


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
    """

    modules_dir = PROJECT_ROOT / "calculator"

    REQUIRED = [
        modules_dir / "MathEngine.py",
        modules_dir / "error.py",
        modules_dir / "config_manager.py",
        PROJECT_ROOT / "config.json"
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def run_session(lines, settings=None):

    """
    Evaluate each entered line and yield what the display shows afterwards.

    - Blank lines are ignored (nothing to evaluate).
    - On any MathError the display keeps its previous value.
    """

    if settings is None:
        settings = config_manager.load_setting_value("all")

    display = "0"
    for line in lines:
        problem = line.strip()
        if problem.lower() in EXIT_COMMANDS:
            return
        if not problem:
            continue

        try:
            display = MathEngine.calculate(problem)
        except E.MathError as e:
            if settings.get("show_errors"):
                category, _ = E.describe(e.code)
                print(f"{category} {e.code}: {e.message}")

        yield display


def main():

    """
    Load configuration and start the loop.
    - Keep this thin: no business logic here.
    """

    all_settings = config_manager.validate_settings(config_manager.load_setting_value("all"))
    MathEngine.debug = all_settings["debug"]
    if MathEngine.debug:
        print("Config geladen:", all_settings)

    print("Enter the problem (exit to quit): ")
    for display in run_session(sys.stdin, all_settings):
        print(display)


if __name__ == "__main__":
    check_files_exist()
    main()
