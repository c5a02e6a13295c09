"""Constants used for YAML table configuration parsing."""

# Table name key
NAME_KEY = "name"

# Interpolation algorithm key
INTERPOLATION_KEY = "interpolation"

# Inline sample keys
X_KEY = "x"
Y_KEY = "y"

# File table keys
FILE_PATH_KEY = "file_path"
X_COLUMN_KEY = "x_column"
Y_COLUMN_KEY = "y_column"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
