"""Convert between OpenAI chat completion types and planner messages."""

import json
from typing import Any, Dict, List, Sequence

from openai.types.chat import ChatCompletion, ChatCompletionMessage

from planner_actions.action_core.exceptions import BatchPreconditionError
from planner_actions.action_core.logger import get_logger
from planner_actions.action_core.messages import AssistantMessage, ToolMessage
from planner_actions.action_core.tools.models import ToolCall

logger = get_logger(__name__)


class OpenAIActionAdapter:
    """Adapter between the OpenAI chat API and the action runner."""

    @classmethod
    def from_chat_completion(cls, response: ChatCompletion) -> AssistantMessage:
        """Extract the planner message from a chat completion.

        Args:
            response: The chat completion returned for the planner's turn.

        Returns:
            The assistant message of the first choice.

        Raises:
            BatchPreconditionError: If the completion has no choices.
        """
        if not response.choices:
            raise BatchPreconditionError("Chat completion contains no choices.")
        return cls.to_assistant_message(response.choices[0].message)

    @staticmethod
    def to_assistant_message(message: ChatCompletionMessage) -> AssistantMessage:
        """Convert an OpenAI assistant message, keeping only function tool calls.

        Arguments are JSON-decoded. Malformed JSON is passed on as the raw string,
        so the executor reports it as a schema mismatch for that call alone.

        Args:
            message: The assistant message from the completion.

        Returns:
            The provider-agnostic assistant message.
        """
        tool_calls: List[ToolCall] = []
        for tool_call in message.tool_calls or []:
            if tool_call.type != "function":
                logger.debug("Skipping non-function tool call '%s'.", tool_call.id)
                continue

            raw_arguments = tool_call.function.arguments
            arguments: Any
            try:
                arguments = json.loads(raw_arguments) if raw_arguments else {}
            except json.JSONDecodeError:
                logger.warning("Tool call '%s' has malformed JSON arguments.", tool_call.id)
                arguments = raw_arguments

            tool_calls.append(ToolCall(name=tool_call.function.name, args=arguments, call_id=tool_call.id))

        return AssistantMessage(content=message.content or "", tool_calls=tool_calls or None)

    @staticmethod
    def build_tool_messages(messages: Sequence[ToolMessage]) -> List[Dict[str, Any]]:
        """Build OpenAI ``role=tool`` messages to append to the chat history.

        Args:
            messages: The tool messages returned by the action runner.

        Returns:
            A list of dictionaries accepted by ``chat.completions.create``.
        """
        return [
            {
                "role": "tool",
                "tool_call_id": message.tool_call_id,
                "content": message.content,
            }
            for message in messages
        ]
