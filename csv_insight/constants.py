DEFAULT_CONFIG = {
    "max_upload_mb": 50,
    "max_rows": 250000,
    "max_cols": 2000,
    "preview_rows": 10,
    "sample_values": 5,
    "top_categories": 5,
    "top_correlations": 5,
    "strict_rows": False,
    "missing_warning_threshold": 0.95,
    "enable_preview_export": True,
    "output_dir": "outputs",
    "log_level": "INFO",
}

# column type labels
NUMERIC = "numeric"
CATEGORICAL = "categorical"
DATETIME = "datetime"
TEXT = "text"
COLUMN_TYPES = (NUMERIC, CATEGORICAL, DATETIME, TEXT)

# inference thresholds (strict comparisons)
NUMERIC_RATIO_THRESHOLD = 0.8
DATE_RATIO_THRESHOLD = 0.8
CATEGORICAL_UNIQUE_RATIO_THRESHOLD = 0.1
