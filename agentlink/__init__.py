"""agentlink - share one AGENT.md between Claude Code and Gemini CLI."""
