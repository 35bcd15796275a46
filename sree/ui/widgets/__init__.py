"""Small display widgets: spinner, diff view, file tree and tool-call panel."""