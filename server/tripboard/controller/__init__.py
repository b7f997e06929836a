"""HTTP controllers; each subpackage exposes init_app() returning its blueprint."""
