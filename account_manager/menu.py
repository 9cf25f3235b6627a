"""
Menu Loop

The interactive front end. A two-state machine:

    RUNNING --(choice "4" or end of input)--> EXITED

Each iteration prints the menu, reads one line, strips it and
dispatches. Anything other than "1"-"4" is reported and the loop
carries on; the only way out is choosing exit (or stdin closing,
after which no further choice can arrive).

Input and output are injected so the loop can be driven by a script
in tests exactly as a user would drive it at the terminal.
"""

from decimal import Decimal
from enum import Enum
from typing import Callable, Optional
from uuid import UUID

import structlog

from account_manager.audit import AuditLogger, create_correlation_id
from account_manager.models.account import OperationResult, TransactionType
from account_manager.operations import AccountOperations
from account_manager.validation import AmountValidator, InvalidAmountError


logger = structlog.get_logger(__name__)

EXIT_SUCCESS = 0

MENU_TEXT = "\n".join([
    "--------------------------------",
    "Account Management System",
    "1. View Balance",
    "2. Credit Account",
    "3. Debit Account",
    "4. Exit",
    "--------------------------------",
])

CHOICE_PROMPT = "Enter your choice (1-4): "
CREDIT_PROMPT = "Enter credit amount: "
DEBIT_PROMPT = "Enter debit amount: "

INVALID_CHOICE_MESSAGE = "Invalid choice, please select 1-4."
INVALID_AMOUNT_MESSAGE = "Invalid amount, please enter a non-negative number."
INVALID_SIGNED_AMOUNT_MESSAGE = "Invalid amount, please enter a number."
FAREWELL_MESSAGE = "Exiting the program. Goodbye!"


class MenuState(str, Enum):
    """Menu loop states."""
    RUNNING = "running"
    EXITED = "exited"


class MenuChoice(str, Enum):
    """The four menu entries, keyed by what the user types."""
    VIEW_BALANCE = "1"
    CREDIT = "2"
    DEBIT = "3"
    EXIT = "4"


class MenuLoop:
    """
    Read-eval loop over the account operations.

    run() blocks until the user exits and returns the process exit code.
    """

    def __init__(
        self,
        operations: AccountOperations,
        validator: Optional[AmountValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        input_fn: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
        correlation_id: Optional[UUID] = None,
    ):
        self._operations = operations
        self._validator = validator or AmountValidator()
        self._audit_logger = audit_logger
        self._input = input_fn
        self._echo = echo
        self.correlation_id = correlation_id or create_correlation_id()
        self.state = MenuState.RUNNING

        # Tie every operation run from this loop to the same session.
        self._operations.correlation_id = self.correlation_id

    @property
    def is_running(self) -> bool:
        return self.state == MenuState.RUNNING

    def run(self) -> int:
        """Run until exit is chosen. Returns the exit code."""
        self.state = MenuState.RUNNING
        logger.info("session_started", correlation_id=str(self.correlation_id))
        if self._audit_logger:
            self._audit_logger.log_session_started(
                initial_balance=self._operations.storage.read(),
                correlation_id=self.correlation_id,
            )

        while self.is_running:
            try:
                self.step()
            except EOFError:
                logger.warning(
                    "input_closed",
                    correlation_id=str(self.correlation_id),
                )
                self._exit()

        return EXIT_SUCCESS

    def step(self) -> Optional[OperationResult]:
        """
        Run one iteration: show the menu, read a choice, dispatch it.

        Returns the operation result, or None when no operation ran
        (invalid choice, invalid amount, or exit).
        """
        self._echo(MENU_TEXT)
        raw_choice = self._input(CHOICE_PROMPT)
        return self.dispatch(raw_choice.strip())

    def dispatch(self, choice: str) -> Optional[OperationResult]:
        """Route a stripped menu choice to its operation."""
        try:
            menu_choice = MenuChoice(choice)
        except ValueError:
            self._echo(INVALID_CHOICE_MESSAGE)
            if self._audit_logger:
                self._audit_logger.log_invalid_menu_choice(
                    choice=choice,
                    correlation_id=self.correlation_id,
                )
            return None

        if menu_choice == MenuChoice.VIEW_BALANCE:
            return self._operations.view_balance()
        elif menu_choice == MenuChoice.CREDIT:
            amount = self._prompt_amount(TransactionType.CREDIT)
            if amount is None:
                return None
            return self._operations.credit_account(amount)
        elif menu_choice == MenuChoice.DEBIT:
            amount = self._prompt_amount(TransactionType.DEBIT)
            if amount is None:
                return None
            return self._operations.debit_account(amount)
        else:
            self._exit()
            return None

    def _prompt_amount(self, operation: TransactionType) -> Optional[Decimal]:
        prompt = CREDIT_PROMPT if operation == TransactionType.CREDIT else DEBIT_PROMPT
        raw_amount = self._input(prompt)

        try:
            return self._validator.parse(raw_amount)
        except InvalidAmountError as e:
            self._echo(
                INVALID_SIGNED_AMOUNT_MESSAGE
                if self._validator.allow_negative
                else INVALID_AMOUNT_MESSAGE
            )
            if self._audit_logger:
                self._audit_logger.log_invalid_amount(
                    raw_input=e.raw_input,
                    operation=operation.value,
                    reason=e.reason,
                    correlation_id=self.correlation_id,
                )
            return None

    def _exit(self) -> None:
        self._echo(FAREWELL_MESSAGE)
        self.state = MenuState.EXITED
        logger.info("session_ended", correlation_id=str(self.correlation_id))
        if self._audit_logger:
            self._audit_logger.log_session_ended(
                final_balance=self._operations.storage.read(),
                correlation_id=self.correlation_id,
            )
