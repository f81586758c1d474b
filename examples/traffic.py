"""Generate a fake user session log from a recorded one."""
import enum
import itertools
import logging

from markov_traffic.chain import MarkovChain
from markov_traffic.settings import settings


class UserAction(enum.Enum):
    SignIn = "sign_in"
    SignOut = "sign_out"
    CreateTodo = "create_todo"
    DeleteTodo = "delete_todo"
    ListTodos = "list_todos"


RECORDED = [
    UserAction.SignIn,
    UserAction.ListTodos,
    UserAction.CreateTodo,
    UserAction.CreateTodo,
    UserAction.SignOut,
    UserAction.SignIn,
    UserAction.ListTodos,
    UserAction.DeleteTodo,
    UserAction.DeleteTodo,
    UserAction.CreateTodo,
    UserAction.CreateTodo,
    UserAction.SignOut,
    UserAction.SignIn,
    UserAction.ListTodos,
    UserAction.CreateTodo,
    UserAction.DeleteTodo,
    UserAction.CreateTodo,
    UserAction.DeleteTodo,
    UserAction.ListTodos,
    UserAction.DeleteTodo,
    UserAction.SignOut,
]


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    chain: MarkovChain[UserAction] = MarkovChain.from_settings(settings)
    chain.update(RECORDED)

    # Generate N events
    for action in itertools.islice(chain.iterate(), 16):
        if action is UserAction.SignIn:
            print("## New session ##")
        print(action.name)

    # Generate until SignOut:
    # for action in itertools.takewhile(lambda a: a is not UserAction.SignOut, chain.iterate()):
    #     print(action.name)


if __name__ == "__main__":
    main()
