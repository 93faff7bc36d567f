"""Demonstrations of the standalone behavioral patterns."""

import click


@click.group()
def patterns() -> None:
    """Run the standalone behavioral pattern examples."""
    pass


@patterns.command("immutable")
@click.option("--name", default="Foo", show_default=True, help="Name of the person")
def patterns_immutable(name: str) -> None:
    """Upper-case a name without changing the person."""
    from behavioral.patterns.immutable import ImmutablePerson

    person = ImmutablePerson(name=name)
    click.echo(person.uppercased())
    click.echo(f"Unchanged: {person.name}")


@patterns.command("iterator")
@click.argument("titles", nargs=-1)
@click.option(
    "--library",
    type=click.Choice(["spotify", "pandora"]),
    default="spotify",
    show_default=True,
    help="Library to iterate",
)
def patterns_iterator(titles: tuple, library: str) -> None:
    """Iterate over a music library of TITLES (default: Foo Bar)."""
    from behavioral.patterns.iterator import Pandora, Song, Spotify

    songs = [Song(title=title) for title in (titles or ("Foo", "Bar"))]
    music = Spotify(songs=songs) if library == "spotify" else Pandora(songs=songs)

    for song in music:
        click.echo(f"I've read: {song.title}")


@patterns.command("observer")
@click.option("--users", default=2, show_default=True, type=click.IntRange(min=0), help="Number of subscribed users")
def patterns_observer(users: int) -> None:
    """Notify subscribed users when a product comes into stock."""
    from behavioral.patterns.observer import Product, User

    shorts = Product()
    subscribers = [User(name=f"user{i + 1}") for i in range(users)]
    for user in subscribers:
        shorts.attach(user)

    shorts.in_stock = True

    for user in subscribers:
        for in_stock in user.notifications:
            click.echo(f"{user.name}: Is product available? {in_stock}")


@patterns.command("strategy")
@click.argument("file_name", default="file")
def patterns_strategy(file_name: str) -> None:
    """Save FILE_NAME with the doc and text strategies."""
    from behavioral.patterns.strategy import DocFileStrategy, SaveFileDialog, TextFileStrategy

    for strategy in (DocFileStrategy(), TextFileStrategy()):
        path = SaveFileDialog(strategy=strategy).save(file_name)
        click.echo(f"Saved in {path}")


@patterns.command("template")
def patterns_template() -> None:
    """Play Monopoly and Battleship through the same game template."""
    from behavioral.patterns.template import Battleship, BoardGameController, Monopoly

    for game in (Monopoly(), Battleship()):
        for message in BoardGameController(delegate=game).play():
            click.echo(message)
