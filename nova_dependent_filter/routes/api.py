def register(route):
    route.get("/{resource}/filters/options", "FilterController@options").name(
        "nova-dependent-filter.resource.options"
    )
    route.get("/{resource}/lens/{lens}/filters/options", "LensFilterController@options").name(
        "nova-dependent-filter.lens.options"
    )
