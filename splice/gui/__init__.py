"""GUI toolkit: a recording canvas, element and container bases, buttons, labels, sliders, pages and the active GUI."""