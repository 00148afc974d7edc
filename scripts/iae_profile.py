"""iae policy profile.

Template for a per-deployment policy file. Copy it next to your
application and load it at startup::

    from iae import configure_from_file
    configure_from_file("iae_profile.py")

or inspect what it resolves to::

    iae-policy scripts/iae_profile.py -v

IAE_* environment variables and command-line options override it.
"""

CONFIG = {
    # ========================================================================
    # AXIS
    # ========================================================================
    # "release_debug": chains are release checks, .debug() switches to debug
    # "visibility":    exported (public) vs not exported (_private) functions
    "AXIS": "release_debug",

    # ========================================================================
    # MODES: "off", "error" or "panic" ("disabled" / "abort" also work)
    # ========================================================================
    "RELEASE": "error",       # Release checks return IllegalArgumentError
    "DEBUG": "panic",         # Debug checks abort the call stack

    "EXPORTED": "error",      # Only used on the visibility axis
    "NOT_EXPORTED": "panic",  # Only used on the visibility axis

    "LOG_LEVEL": "WARNING",
}
