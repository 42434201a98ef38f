"""ktscaffold -- scaffolds Kotlin/Gradle projects from a name and a package."""

__version__ = "0.1.0"
