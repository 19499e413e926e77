def negotiate(acceptable_content_types, registry):
    """Pick the RDF format for a response from the client's preferences.

    acceptable_content_types is the list of media types from the Accept
    header, already ordered by preference by the HTTP layer. The format id
    of the first one that is registered wins. Returns None when the header
    was absent or nothing matched (including a bare */*), in which case
    the caller uses its default format."""
    for content_type in acceptable_content_types or []:
        mime_type = content_type.split(";", 1)[0].strip()
        if not mime_type:
            continue
        descriptor = registry.lookup_by_mime_type(mime_type)
        if descriptor is not None:
            return descriptor.format_id
    return None
