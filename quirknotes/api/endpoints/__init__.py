# API endpoint modules
