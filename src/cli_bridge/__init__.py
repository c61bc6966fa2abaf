"""cli-bridge: OpenAI chat-completion requests in, single-turn CLI input out."""

__version__ = '0.1.0'
