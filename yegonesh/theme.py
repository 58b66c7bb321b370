GRAY = "grey50"
