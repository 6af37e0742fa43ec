"""Example script printing the factory playground walkthrough."""
import sys
from playground import run_playground


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else None

    for line in run_playground(config_path):
        print(line)


if __name__ == "__main__":
    main()
