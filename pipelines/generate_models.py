# Regenerate assets/models/<bot>.model.json for the default bots.
from botmodels.generate_models import build_parser, main
import sys

if __name__ == '__main__':
    sys.exit(main(build_parser().parse_args()))
