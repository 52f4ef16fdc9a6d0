"""
Command-line interface for shot_catalog.

Commands:
    scan: Group a folder into shots and list them
    tags: Add, remove, rename and list tags
    playlists: Create, rename, delete, fill and list playlists
    cover: Choose the cover of a shot
    export: Write playlists or tags to a JSON file
    import: Merge a JSON export back in
    recent: Show recently opened folders

Example:
    $ shot-catalog scan /renders/session_01 --tag red --query forest
    $ shot-catalog tags add shotA red
    $ shot-catalog playlists create "Best of"
    $ shot-catalog export tags red blue --output ./exports
"""

import sys
from pathlib import Path

import click

from shot_catalog.config import get_log_file, get_log_level, load_config
from shot_catalog.exceptions import ShotCatalogError
from shot_catalog.export import write_export
from shot_catalog.library import Library
from shot_catalog.scanner.directory import shot_files_to_dataframe, shots_to_dataframe
from shot_catalog.utils import setup_logging


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.option('--config', '-c', type=click.Path(exists=True, path_type=Path), help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-essential output')
@click.pass_context
def main(ctx, config, verbose, quiet):
    """Shot Catalog - group media folders into shots, then tag and organize them.

    Tags and playlists live on the remote service; cover choices and the
    active playlist are remembered locally.
    """
    ctx.ensure_object(dict)

    config_data = load_config(config)

    if quiet:
        log_level = 'WARNING'
    elif verbose:
        log_level = 'DEBUG'
    else:
        log_level = get_log_level(config_data)

    setup_logging(log_level, get_log_file(config_data))

    if 'library' not in ctx.obj:
        ctx.obj['library'] = Library.from_config(config_data)

    library = ctx.obj['library']
    ctx.call_on_close(library.close)

    if not library.load_remote_state():
        click.echo("Warning: could not load tags and playlists from the server", err=True)


@main.command()
@click.argument('path', type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option('--tag', '-t', 'tags', multiple=True, help='Only shots with this tag (repeat for AND)')
@click.option('--query', '-q', default='', help='Search shot ids, notes and tags')
@click.option('--playlist', '-p', is_flag=True, help='Only shots in the active playlist')
@click.option('--files', 'show_files', is_flag=True, help='List every file of the shown shots')
@click.pass_context
def scan(ctx, path, tags, query, playlist, show_files):
    """Group the files of PATH into shots and list them.

    Examples:
        shot-catalog scan ./renders
        shot-catalog scan ./renders --tag red --tag tall
        shot-catalog scan ./renders --query "forest"
        shot-catalog scan ./renders --files
    """
    library = ctx.obj['library']

    try:
        library.load_directory(path)
    except ShotCatalogError as e:
        _fail(str(e))

    if playlist:
        shots = library.active_playlist_shots()
    else:
        library.selection.selected_tags.update(tags)
        library.selection.search_query = query
        shots = library.filtered_shots()

    if not shots:
        click.echo("No shots found.")
        return

    if show_files:
        df = shot_files_to_dataframe(shots)
    else:
        df = shots_to_dataframe(shots)
        df['tags'] = [', '.join(library.tags.get(shot.id)) for shot in shots]
    click.echo(df.to_string(index=False))
    click.echo(f"\n{len(shots)} of {len(library.shots)} shots")


@main.command()
@click.argument('path', type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument('shot_id')
@click.argument('media_name')
@click.pass_context
def cover(ctx, path, shot_id, media_name):
    """Use MEDIA_NAME as the cover of SHOT_ID in the folder PATH."""
    library = ctx.obj['library']

    try:
        library.load_directory(path)
    except ShotCatalogError as e:
        _fail(str(e))

    if not library.set_cover(shot_id, media_name):
        _fail(f"Shot {shot_id} has no image or video named {media_name}")

    click.echo(f"Cover of {shot_id} set to {media_name}")


@main.group()
def tags():
    """Manage shot tags."""


@tags.command('list')
@click.argument('shot_id', required=False)
@click.pass_context
def tags_list(ctx, shot_id):
    """List all tags, or the tags of SHOT_ID."""
    library = ctx.obj['library']
    values = library.tags.get(shot_id) if shot_id else library.tags.all_tags()
    for tag in values:
        click.echo(tag)


@tags.command('add')
@click.argument('shot_id')
@click.argument('tag')
@click.pass_context
def tags_add(ctx, shot_id, tag):
    """Add TAG to SHOT_ID."""
    library = ctx.obj['library']
    try:
        current = library.tags.add_tag(shot_id, tag)
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"{shot_id}: {', '.join(current)}")


@tags.command('remove')
@click.argument('shot_id')
@click.argument('tag')
@click.pass_context
def tags_remove(ctx, shot_id, tag):
    """Remove TAG from SHOT_ID."""
    library = ctx.obj['library']
    try:
        remaining = library.tags.remove_tag(shot_id, tag)
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"{shot_id}: {', '.join(remaining) or '(no tags)'}")


@tags.command('rename')
@click.argument('old_tag')
@click.argument('new_tag')
@click.pass_context
def tags_rename(ctx, old_tag, new_tag):
    """Rename OLD_TAG to NEW_TAG on every shot."""
    library = ctx.obj['library']
    try:
        changed = library.tags.rename_tag(old_tag, new_tag)
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"Renamed on {changed} shots")


@main.group()
def playlists():
    """Manage playlists."""


@playlists.command('list')
@click.argument('name', required=False)
@click.pass_context
def playlists_list(ctx, name):
    """List playlists, or the shots of playlist NAME."""
    library = ctx.obj['library']
    store = library.playlists

    if name:
        if name not in store:
            _fail(f"Playlist '{name}' does not exist")
        for shot_id in sorted(store.get(name)):
            click.echo(shot_id)
        return

    for playlist_name in store.names:
        marker = '*' if playlist_name == store.active else ' '
        click.echo(f"{marker} {playlist_name} ({len(store.get(playlist_name))})")


@playlists.command('create')
@click.argument('name')
@click.pass_context
def playlists_create(ctx, name):
    """Create playlist NAME and make it active."""
    library = ctx.obj['library']
    try:
        created = library.playlists.create(name)
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"Created playlist {created}")


@playlists.command('rename')
@click.argument('old_name')
@click.argument('new_name')
@click.pass_context
def playlists_rename(ctx, old_name, new_name):
    """Rename playlist OLD_NAME to NEW_NAME."""
    library = ctx.obj['library']
    try:
        renamed = library.playlists.rename(old_name, new_name)
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"Renamed playlist {old_name} to {renamed}")


@playlists.command('delete')
@click.argument('name')
@click.confirmation_option(prompt='Delete this playlist?')
@click.pass_context
def playlists_delete(ctx, name):
    """Delete playlist NAME."""
    library = ctx.obj['library']
    try:
        library.playlists.delete(name)
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"Deleted playlist {name}")


@playlists.command('use')
@click.argument('name')
@click.pass_context
def playlists_use(ctx, name):
    """Make playlist NAME active."""
    library = ctx.obj['library']
    if name not in library.playlists:
        _fail(f"Playlist '{name}' does not exist")
    library.playlists.active = name
    click.echo(f"Active playlist: {name}")


@playlists.command('toggle')
@click.argument('shot_id')
@click.pass_context
def playlists_toggle(ctx, shot_id):
    """Add SHOT_ID to the active playlist, or remove it if present."""
    library = ctx.obj['library']
    try:
        added = library.toggle_in_active_playlist(shot_id)
    except ShotCatalogError as e:
        _fail(str(e))
    verb = 'Added' if added else 'Removed'
    click.echo(f"{verb} {shot_id} ({library.playlists.active})")


@main.group()
def export():
    """Export playlists or tags to JSON."""


@export.command('playlists')
@click.argument('names', nargs=-1)
@click.option('--all', 'export_all', is_flag=True, help='Export every playlist')
@click.option('--output', '-o', type=click.Path(file_okay=False, path_type=Path), default=Path('.'))
@click.pass_context
def export_playlists_cmd(ctx, names, export_all, output):
    """Export the playlists NAMES."""
    library = ctx.obj['library']
    selected = library.playlists.names if export_all else names
    try:
        document = library.export_playlists(selected)
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"Wrote {write_export(document, output)}")


@export.command('tags')
@click.argument('tag_names', nargs=-1)
@click.option('--all', 'export_all', is_flag=True, help='Export every tag')
@click.option('--output', '-o', type=click.Path(file_okay=False, path_type=Path), default=Path('.'))
@click.pass_context
def export_tags_cmd(ctx, tag_names, export_all, output):
    """Export every shot tagged with any of TAG_NAMES, with all its tags."""
    library = ctx.obj['library']
    selected = library.tags.all_tags() if export_all else tag_names
    try:
        document = library.export_tags(selected)
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"Wrote {write_export(document, output)}")


@main.group('import')
def import_():
    """Merge a JSON export into the current tags or playlists."""


@import_.command('tags')
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.confirmation_option(prompt='Importing merges the file into the existing tags. Continue?')
@click.pass_context
def import_tags_cmd(ctx, file_path):
    """Merge the tags in FILE_PATH."""
    library = ctx.obj['library']
    try:
        count = library.import_tags(file_path.read_text(encoding='utf-8'))
    except ShotCatalogError as e:
        _fail(str(e))
    click.echo(f"Imported tags for {count} shots")


@import_.command('playlists')
@click.argument('file_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--folder', type=click.Path(exists=True, file_okay=False, path_type=Path),
              help='Media folder to check the imported shot ids against')
@click.pass_context
def import_playlists_cmd(ctx, file_path, folder):
    """Merge the playlists in FILE_PATH."""
    library = ctx.obj['library']
    try:
        if folder:
            library.load_directory(folder)
        summary = library.import_playlists(file_path.read_text(encoding='utf-8'))
    except ShotCatalogError as e:
        _fail(str(e))

    click.echo(f"Imported {summary.imported} playlists")
    if summary.missing_shots:
        click.echo(f"Warning: {summary.missing_shots} shots were not found in the current folder")


@main.command()
@click.pass_context
def recent(ctx):
    """Show recently opened folders."""
    library = ctx.obj['library']
    try:
        folders = library.recent_directories()
    except ShotCatalogError as e:
        _fail(str(e))
    for folder in folders:
        click.echo(folder)


if __name__ == '__main__':
    main()
