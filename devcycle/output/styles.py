class Style:
    regular = 'default'
    info = 'bold cyan'
    context = 'dim'
    mark = 'bold magenta'
    mark_neutral = 'bold'
    good = 'green'
    suspicious = 'yellow'
    bad = 'bold red'
