"""Fixed configuration for environment discovery and scaffolding."""

# Primary repository marker: the DefinitelyTyped checkout's package.json
DEFINITELY_TYPED_MARKER = "package.json"
DEFINITELY_TYPED_NAME = "DefinitelyTyped"

# TSD tool config marker; its "path" field points at the typings directory
TSD_MARKER = "tsd.json"

GUIDE_URL = "http://definitelytyped.org/guides/creating.html"
DEFINITIONS_URL = "https://github.com/borisyankov/DefinitelyTyped"

# Generated file suffixes, appended to the typing name
DEFINITION_SUFFIX = ".d.ts"
TESTS_SUFFIX = "-tests.ts"
TSCPARAMS_SUFFIX = "-tests.ts.tscparams"
