"""Services — async orchestration between routes, core logic and the engine."""
