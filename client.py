"""A CLI for the vitotrol library.

vitotrol is a client for the Viessmann Vitotrol SOAP service, as used for the remote
control of Vitotronic (heating) controllers.
"""

try:
    from vitotrol_cli.client import main

except ModuleNotFoundError:
    import os
    import sys

    sys.path.append(f"{os.path.dirname(__file__)}/src")

    from vitotrol_cli.client import main

if __name__ == "__main__":
    main()
