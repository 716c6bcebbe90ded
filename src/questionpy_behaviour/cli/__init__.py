"""Command line interface for inspecting QuestionPy attempt state."""
