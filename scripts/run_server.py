#!/usr/bin/env python3
"""Development server runner for SIMBYTE."""

import uvicorn

if __name__ == "__main__":
    uvicorn.run(
        "simbyte.api:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
